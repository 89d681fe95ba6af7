"""Front token identity (`GET /me`)."""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_front.models import IdentityResponse


class TokenIdentity(Resource):
    async def get(self) -> IdentityResponse:
        """The company the API token was issued for."""
        return await self.client.request("GET", "me", IdentityResponse)
