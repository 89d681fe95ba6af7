"""Ramp developer tokens.

Both endpoints authenticate with the app's client credentials (HTTP basic)
and take a form-encoded body, not the bearer token and JSON of other calls.
"""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_ramp.models import TokenRequestBody, TokenResponse, TokenRevokeRequestBody


class Tokens(Resource):
    async def create(self, body: TokenRequestBody) -> TokenResponse:
        """Exchange a grant for a token, e.g. a client-credentials grant with `scope`."""
        return await self.client.request(
            "POST",
            "developer/v1/token",
            TokenResponse,
            form=body.to_payload(),
            headers=self.client.basic_auth_headers(),
        )

    async def revoke(self, body: TokenRevokeRequestBody) -> None:
        await self.client.request(
            "POST",
            "developer/v1/token/revoke",
            form=body.to_payload(),
            headers=self.client.basic_auth_headers(),
        )
