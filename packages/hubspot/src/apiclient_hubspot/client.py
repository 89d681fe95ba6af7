"""HubSpot API client.

Auth: private app access token via `Authorization: Bearer`.
Pagination: `after` cursor from `paging.next.after`.
Base URL: https://api.hubspot.com
"""

from __future__ import annotations

from functools import cached_property

import httpx
from apiclient_shared import BaseClient, ClientConfig
from apiclient_shared.config import optional_env, require_env

from apiclient_hubspot.resources import ContactObjects, CrmObjects, Users

DEFAULT_HOST = "https://api.hubspot.com"


class HubSpotClient(BaseClient):
    """Client for the HubSpot CRM objects and user provisioning APIs."""

    def _default_base_url(self) -> str:
        return DEFAULT_HOST

    @classmethod
    def from_env(
        cls,
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HubSpotClient:
        """Build a client from HUBSPOT_API_TOKEN and the optional HUBSPOT_HOST."""
        return cls(
            require_env("HUBSPOT_API_TOKEN"),
            base_url=optional_env("HUBSPOT_HOST", DEFAULT_HOST),
            config=config,
            transport=transport,
        )

    @cached_property
    def contacts(self) -> ContactObjects:
        return ContactObjects(self)

    @cached_property
    def tickets(self) -> CrmObjects:
        return CrmObjects(self, "tickets")

    @cached_property
    def users(self) -> Users:
        return Users(self)

    def objects(self, object_type: str) -> CrmObjects:
        """Accessor for any other CRM object type, e.g. "companies" or "deals"."""
        return CrmObjects(self, object_type)
