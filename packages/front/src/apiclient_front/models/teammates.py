"""Teammate, inbox and token identity models."""

from typing import Any

from apiclient_shared import ApiModel
from pydantic import Field

from apiclient_front.models.common import FrontList, FrontPage, Links


class TeammateResponse(ApiModel):
    """A Front user."""

    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_admin: bool | None = None
    is_available: bool | None = None
    is_blocked: bool | None = None
    custom_fields: dict[str, Any] | None = None


class UpdateTeammate(ApiModel):
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_available: bool | None = None
    custom_fields: dict[str, Any] | None = None


class ListTeammatesResponse(FrontList):
    results: list[TeammateResponse] = Field(default_factory=list, alias="_results")


class InboxResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    name: str | None = None
    is_private: bool | None = None
    is_public: bool | None = None
    custom_fields: dict[str, Any] | None = None


class ListTeammateInboxesResponse(FrontList):
    results: list[InboxResponse] = Field(default_factory=list, alias="_results")


class IdentityResponse(ApiModel):
    """The company the API token belongs to."""

    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    name: str | None = None
