"""Ramp business profile and balance."""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_ramp.models import Business, BusinessBalance


class BusinessInfo(Resource):
    async def get(self) -> Business:
        """The business the token belongs to."""
        return await self.client.request("GET", "developer/v1/business", Business)

    async def get_balance(self) -> BusinessBalance:
        return await self.client.request("GET", "developer/v1/business/balance", BusinessBalance)
