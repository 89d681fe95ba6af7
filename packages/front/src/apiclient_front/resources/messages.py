"""Front messages."""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_front.models import (
    GetMessageSeenStatusResponse,
    MarkMessageSeenRequestBody,
    MessageResponse,
    OutboundReplyMessage,
)


class Messages(Resource):
    """Accessor for the Front messages endpoints."""

    async def reply_to_conversation(
        self, conversation_id: str, body: OutboundReplyMessage
    ) -> MessageResponse:
        """Reply to a conversation; the reply goes out on the conversation's channel."""
        return await self.client.request(
            "POST",
            "conversations/{conversation_id}/messages",
            MessageResponse,
            path_params={"conversation_id": conversation_id},
            body=body,
        )

    async def get(self, message_id: str) -> MessageResponse:
        return await self.client.request(
            "GET", "messages/{message_id}", MessageResponse, path_params={"message_id": message_id}
        )

    async def get_seen_status(self, message_id: str) -> GetMessageSeenStatusResponse:
        """Seen receipts of an outbound message."""
        return await self.client.request(
            "GET",
            "messages/{message_id}/seen",
            GetMessageSeenStatusResponse,
            path_params={"message_id": message_id},
        )

    async def mark_seen(self, message_id: str) -> None:
        await self.client.request(
            "POST",
            "messages/{message_id}/seen",
            path_params={"message_id": message_id},
            body=MarkMessageSeenRequestBody(),
        )
