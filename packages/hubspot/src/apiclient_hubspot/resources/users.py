"""HubSpot account users, roles and teams (`settings/v3/users`)."""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_hubspot.models import (
    CollectionResponsePublicPermissionSetNoPaging,
    CollectionResponsePublicTeamNoPaging,
    CollectionResponsePublicUserForwardPaging,
    IdProperty,
    PublicUser,
    PublicUserUpdate,
    UserProvisionRequest,
)

USER = "settings/v3/users/{user_id}"


class Users(Resource):
    """Accessor for the HubSpot user provisioning endpoints."""

    async def get_page(
        self, limit: int | None = None, after: str | None = None
    ) -> CollectionResponsePublicUserForwardPaging:
        return await self.client.request(
            "GET",
            "settings/v3/users/",
            CollectionResponsePublicUserForwardPaging,
            params={"after": after, "limit": limit},
        )

    async def create(self, body: UserProvisionRequest) -> PublicUser:
        """Invite a user; `send_welcome_email` controls the invitation email."""
        return await self.client.request("POST", "settings/v3/users/", PublicUser, body=body)

    async def get_by_id(self, user_id: str, id_property: IdProperty | None = None) -> PublicUser:
        """Fetch a user by id, or by email with `id_property=IdProperty.EMAIL`."""
        return await self.client.request(
            "GET",
            USER,
            PublicUser,
            path_params={"user_id": user_id},
            params={"idProperty": id_property},
        )

    async def replace(
        self, user_id: str, body: PublicUserUpdate, id_property: IdProperty | None = None
    ) -> PublicUser:
        return await self.client.request(
            "PUT",
            USER,
            PublicUser,
            path_params={"user_id": user_id},
            params={"idProperty": id_property},
            body=body,
        )

    async def archive(self, user_id: str, id_property: IdProperty | None = None) -> None:
        """Remove a user from the account."""
        await self.client.request(
            "DELETE",
            USER,
            path_params={"user_id": user_id},
            params={"idProperty": id_property},
        )

    async def list_roles(self) -> CollectionResponsePublicPermissionSetNoPaging:
        """Roles (permission sets) available on the account."""
        return await self.client.request(
            "GET", "settings/v3/users/roles", CollectionResponsePublicPermissionSetNoPaging
        )

    async def list_teams(self) -> CollectionResponsePublicTeamNoPaging:
        return await self.client.request(
            "GET", "settings/v3/users/teams", CollectionResponsePublicTeamNoPaging
        )
