"""Front contacts: people and companies the team talks to.

Contacts live at three scopes: company-wide (`contacts`), shared with a team
(`teams/{team_id}/contacts`) and private to a teammate
(`teammates/{teammate_id}/contacts`). Lists paginate with `page_token`.
"""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_front.models import (
    Contact,
    ContactResponse,
    CreateContact,
    ListContactsResponse,
    ListConversationsResponse,
    MergeContacts,
    SortOrder,
)


class Contacts(Resource):
    """Accessor for the Front contacts endpoints."""

    def _list_params(
        self,
        limit: int | None,
        page_token: str | None,
        q: str | None,
        sort_by: str | None,
        sort_order: SortOrder | None,
    ) -> dict[str, object]:
        return {
            "limit": limit,
            "page_token": page_token,
            "q": q,
            "sort_by": sort_by,
            "sort_order": sort_order,
        }

    async def list(
        self,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
        sort_by: str | None = None,
        sort_order: SortOrder | None = None,
    ) -> ListContactsResponse:
        """List the company's contacts.

        `q` is Front's JSON search filter, e.g. `{"updated_after": 1680000000}`.
        """
        return await self.client.request(
            "GET",
            "contacts",
            ListContactsResponse,
            params=self._list_params(limit, page_token, q, sort_by, sort_order),
        )

    async def create(self, body: CreateContact) -> ContactResponse:
        return await self.client.request("POST", "contacts", ContactResponse, body=body)

    async def list_team(
        self,
        team_id: str,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
        sort_by: str | None = None,
        sort_order: SortOrder | None = None,
    ) -> ListContactsResponse:
        """List the contacts shared with a team."""
        return await self.client.request(
            "GET",
            "teams/{team_id}/contacts",
            ListContactsResponse,
            path_params={"team_id": team_id},
            params=self._list_params(limit, page_token, q, sort_by, sort_order),
        )

    async def create_team(self, team_id: str, body: CreateContact) -> ContactResponse:
        return await self.client.request(
            "POST",
            "teams/{team_id}/contacts",
            ContactResponse,
            path_params={"team_id": team_id},
            body=body,
        )

    async def list_teammate(
        self,
        teammate_id: str,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
        sort_by: str | None = None,
        sort_order: SortOrder | None = None,
    ) -> ListContactsResponse:
        """List a teammate's private contacts."""
        return await self.client.request(
            "GET",
            "teammates/{teammate_id}/contacts",
            ListContactsResponse,
            path_params={"teammate_id": teammate_id},
            params=self._list_params(limit, page_token, q, sort_by, sort_order),
        )

    async def create_teammate(self, teammate_id: str, body: CreateContact) -> ContactResponse:
        return await self.client.request(
            "POST",
            "teammates/{teammate_id}/contacts",
            ContactResponse,
            path_params={"teammate_id": teammate_id},
            body=body,
        )

    async def get(self, contact_id: str) -> ContactResponse:
        """Fetch a contact by id or by an alias such as `alt:email:jane@example.com`."""
        return await self.client.request(
            "GET", "contacts/{contact_id}", ContactResponse, path_params={"contact_id": contact_id}
        )

    async def delete(self, contact_id: str) -> None:
        await self.client.request(
            "DELETE", "contacts/{contact_id}", path_params={"contact_id": contact_id}
        )

    async def update(self, contact_id: str, body: Contact) -> None:
        await self.client.request(
            "PATCH", "contacts/{contact_id}", path_params={"contact_id": contact_id}, body=body
        )

    async def merge(self, body: MergeContacts) -> ContactResponse:
        """Merge contacts into one; returns the surviving contact."""
        return await self.client.request("POST", "contacts/merge", ContactResponse, body=body)

    async def list_conversations(
        self,
        contact_id: str,
        limit: int | None = None,
        page_token: str | None = None,
        q: str | None = None,
    ) -> ListConversationsResponse:
        return await self.client.request(
            "GET",
            "contacts/{contact_id}/conversations",
            ListConversationsResponse,
            path_params={"contact_id": contact_id},
            params={"limit": limit, "page_token": page_token, "q": q},
        )
