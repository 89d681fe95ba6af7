"""Front API client.

Auth: API token via `Authorization: Bearer`.
Pagination: `_pagination.next` URL carrying `page_token`.
Base URL: https://api2.frontapp.com
"""

from __future__ import annotations

from functools import cached_property

import httpx
from apiclient_shared import BaseClient, ClientConfig
from apiclient_shared.config import optional_env, require_env

from apiclient_front.resources import (
    Attachments,
    Contacts,
    Conversations,
    Messages,
    Tags,
    Teammates,
    TokenIdentity,
)

DEFAULT_HOST = "https://api2.frontapp.com"


class FrontClient(BaseClient):
    """Client for the Front core API."""

    def _default_base_url(self) -> str:
        return DEFAULT_HOST

    @classmethod
    def from_env(
        cls,
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> FrontClient:
        """Build a client from FRONT_API_TOKEN and the optional FRONT_HOST."""
        return cls(
            require_env("FRONT_API_TOKEN"),
            base_url=optional_env("FRONT_HOST", DEFAULT_HOST),
            config=config,
            transport=transport,
        )

    @cached_property
    def attachments(self) -> Attachments:
        return Attachments(self)

    @cached_property
    def contacts(self) -> Contacts:
        return Contacts(self)

    @cached_property
    def conversations(self) -> Conversations:
        return Conversations(self)

    @cached_property
    def messages(self) -> Messages:
        return Messages(self)

    @cached_property
    def tags(self) -> Tags:
        return Tags(self)

    @cached_property
    def teammates(self) -> Teammates:
        return Teammates(self)

    @cached_property
    def token_identity(self) -> TokenIdentity:
        return TokenIdentity(self)
