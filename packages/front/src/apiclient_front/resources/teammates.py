"""Front teammates."""

from __future__ import annotations

from typing import Any

from apiclient_shared import Resource

from apiclient_front.models import (
    ListConversationsResponse,
    ListTeammateInboxesResponse,
    ListTeammatesResponse,
    TeammateResponse,
    UpdateTeammate,
)


class Teammates(Resource):
    """Accessor for the Front teammates endpoints."""

    async def list(self) -> ListTeammatesResponse:
        return await self.client.request("GET", "teammates", ListTeammatesResponse)

    async def get(self, teammate_id: str) -> TeammateResponse:
        return await self.client.request(
            "GET",
            "teammates/{teammate_id}",
            TeammateResponse,
            path_params={"teammate_id": teammate_id},
        )

    async def update(self, teammate_id: str, body: UpdateTeammate | dict[str, Any]) -> None:
        await self.client.request(
            "PATCH",
            "teammates/{teammate_id}",
            path_params={"teammate_id": teammate_id},
            body=body,
        )

    async def list_assigned_conversations(
        self,
        teammate_id: str,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
    ) -> ListConversationsResponse:
        """Conversations currently assigned to the teammate."""
        return await self.client.request(
            "GET",
            "teammates/{teammate_id}/conversations",
            ListConversationsResponse,
            path_params={"teammate_id": teammate_id},
            params={"limit": limit, "page_token": page_token, "q": q},
        )

    async def list_inboxes(self, teammate_id: str) -> ListTeammateInboxesResponse:
        return await self.client.request(
            "GET",
            "teammates/{teammate_id}/inboxes",
            ListTeammateInboxesResponse,
            path_params={"teammate_id": teammate_id},
        )
