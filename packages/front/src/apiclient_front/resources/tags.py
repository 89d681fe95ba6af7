"""Front tags.

Tags are company-wide, team-scoped or private to a teammate, and can nest
one level of children.
"""

from __future__ import annotations

from typing import Any

from apiclient_shared import Resource

from apiclient_front.models import (
    CreateTag,
    ListConversationsResponse,
    ListTagsResponse,
    TagResponse,
    UpdateTag,
)


class Tags(Resource):
    """Accessor for the Front tags endpoints."""

    async def list(self) -> ListTagsResponse:
        return await self.client.request("GET", "tags", ListTagsResponse)

    async def create(self, body: CreateTag) -> TagResponse:
        return await self.client.request("POST", "tags", TagResponse, body=body)

    async def list_team(self, team_id: str) -> ListTagsResponse:
        return await self.client.request(
            "GET", "teams/{team_id}/tags", ListTagsResponse, path_params={"team_id": team_id}
        )

    async def create_team(self, team_id: str, body: CreateTag) -> TagResponse:
        return await self.client.request(
            "POST", "teams/{team_id}/tags", TagResponse, path_params={"team_id": team_id}, body=body
        )

    async def list_teammate(self, teammate_id: str) -> ListTagsResponse:
        return await self.client.request(
            "GET",
            "teammates/{teammate_id}/tags",
            ListTagsResponse,
            path_params={"teammate_id": teammate_id},
        )

    async def create_teammate(self, teammate_id: str, body: CreateTag) -> TagResponse:
        return await self.client.request(
            "POST",
            "teammates/{teammate_id}/tags",
            TagResponse,
            path_params={"teammate_id": teammate_id},
            body=body,
        )

    async def list_children(self, tag_id: str) -> ListTagsResponse:
        return await self.client.request(
            "GET", "tags/{tag_id}/children", ListTagsResponse, path_params={"tag_id": tag_id}
        )

    async def create_child(self, tag_id: str, body: CreateTag) -> TagResponse:
        return await self.client.request(
            "POST", "tags/{tag_id}/children", TagResponse, path_params={"tag_id": tag_id}, body=body
        )

    async def get(self, tag_id: str) -> TagResponse:
        return await self.client.request(
            "GET", "tags/{tag_id}", TagResponse, path_params={"tag_id": tag_id}
        )

    async def delete(self, tag_id: str) -> None:
        await self.client.request("DELETE", "tags/{tag_id}", path_params={"tag_id": tag_id})

    async def update(self, tag_id: str, body: UpdateTag | dict[str, Any]) -> None:
        await self.client.request(
            "PATCH", "tags/{tag_id}", path_params={"tag_id": tag_id}, body=body
        )

    async def list_tagged_conversations(
        self,
        tag_id: str,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
    ) -> ListConversationsResponse:
        return await self.client.request(
            "GET",
            "tags/{tag_id}/conversations",
            ListConversationsResponse,
            path_params={"tag_id": tag_id},
            params={"limit": limit, "page_token": page_token, "q": q},
        )
