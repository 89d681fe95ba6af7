"""Front conversations: threads of messages and comments in shared inboxes."""

from __future__ import annotations

from typing import Any

from apiclient_shared import Resource

from apiclient_front.models import (
    AddConversationFollowersRequestBody,
    AddConversationLinkRequestBody,
    ConversationResponse,
    CreateConversation,
    DeleteConversationFollowersRequestBody,
    ListConversationEventsResponse,
    ListConversationFollowersResponse,
    ListConversationInboxesResponse,
    ListConversationMessagesResponse,
    ListConversationsResponse,
    RemoveConversationLinkRequestBody,
    SearchConversationsResponse,
    TagIds,
    UpdateConversation,
    UpdateConversationAssignee,
    UpdateConversationReminders,
)

CONVERSATION = "conversations/{conversation_id}"


class Conversations(Resource):
    """Accessor for the Front conversations endpoints."""

    async def list(
        self,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
    ) -> ListConversationsResponse:
        """List conversations, most recently active first."""
        return await self.client.request(
            "GET",
            "conversations",
            ListConversationsResponse,
            params={"limit": limit, "page_token": page_token, "q": q},
        )

    async def create(self, body: CreateConversation) -> ConversationResponse:
        """Start a discussion conversation."""
        return await self.client.request("POST", "conversations", ConversationResponse, body=body)

    async def get_by_id(self, conversation_id: str) -> ConversationResponse:
        return await self.client.request(
            "GET", CONVERSATION, ConversationResponse, path_params={"conversation_id": conversation_id}
        )

    async def update(
        self, conversation_id: str, body: UpdateConversation | dict[str, Any]
    ) -> None:
        """Update assignee, inbox, status or tags."""
        await self._send("PATCH", CONVERSATION, conversation_id, body)

    async def update_assignee(
        self, conversation_id: str, body: UpdateConversationAssignee
    ) -> None:
        await self._send("PUT", f"{CONVERSATION}/assignee", conversation_id, body)

    async def add_tag(self, conversation_id: str, body: TagIds) -> None:
        await self._send("POST", f"{CONVERSATION}/tags", conversation_id, body)

    async def remove_tag(self, conversation_id: str, body: TagIds) -> None:
        await self._send("DELETE", f"{CONVERSATION}/tags", conversation_id, body)

    async def add_link(self, conversation_id: str, body: AddConversationLinkRequestBody) -> None:
        await self._send("POST", f"{CONVERSATION}/links", conversation_id, body)

    async def remove_link(
        self, conversation_id: str, body: RemoveConversationLinkRequestBody
    ) -> None:
        await self._send("DELETE", f"{CONVERSATION}/links", conversation_id, body)

    async def list_inboxes(self, conversation_id: str) -> ListConversationInboxesResponse:
        """List the inboxes a conversation is in."""
        return await self.client.request(
            "GET",
            f"{CONVERSATION}/inboxes",
            ListConversationInboxesResponse,
            path_params={"conversation_id": conversation_id},
        )

    async def list_followers(self, conversation_id: str) -> ListConversationFollowersResponse:
        return await self.client.request(
            "GET",
            f"{CONVERSATION}/followers",
            ListConversationFollowersResponse,
            path_params={"conversation_id": conversation_id},
        )

    async def add_followers(
        self, conversation_id: str, body: AddConversationFollowersRequestBody
    ) -> None:
        await self._send("POST", f"{CONVERSATION}/followers", conversation_id, body)

    async def delete_followers(
        self, conversation_id: str, body: DeleteConversationFollowersRequestBody
    ) -> None:
        await self._send("DELETE", f"{CONVERSATION}/followers", conversation_id, body)

    async def list_messages(
        self,
        conversation_id: str,
        limit: int | None = None,
        page_token: str | None = None,
    ) -> ListConversationMessagesResponse:
        """List the messages in a conversation, newest first."""
        return await self.client.request(
            "GET",
            f"{CONVERSATION}/messages",
            ListConversationMessagesResponse,
            path_params={"conversation_id": conversation_id},
            params={"limit": limit, "page_token": page_token},
        )

    async def list_events(
        self,
        conversation_id: str,
        limit: int | None = None,
        page_token: str | None = None,
    ) -> ListConversationEventsResponse:
        """List the activity events of a conversation."""
        return await self.client.request(
            "GET",
            f"{CONVERSATION}/events",
            ListConversationEventsResponse,
            path_params={"conversation_id": conversation_id},
            params={"limit": limit, "page_token": page_token},
        )

    async def update_reminders(
        self, conversation_id: str, body: UpdateConversationReminders
    ) -> None:
        """Snooze the conversation for a teammate."""
        await self._send("PATCH", f"{CONVERSATION}/reminders", conversation_id, body)

    async def search(
        self,
        query: str,
        limit: int | None = None,
        page_token: str | None = None,
    ) -> SearchConversationsResponse:
        """Search conversations with Front's query syntax, e.g. `tag:tag_123 is:open`."""
        return await self.client.request(
            "GET",
            "conversations/search/{query}",
            SearchConversationsResponse,
            path_params={"query": query},
            params={"limit": limit, "page_token": page_token},
        )

    async def _send(self, method: str, path: str, conversation_id: str, body: Any) -> None:
        await self.client.request(
            method, path, path_params={"conversation_id": conversation_id}, body=body
        )
