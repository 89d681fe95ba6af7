"""Contact models."""

import enum
from typing import Any

from apiclient_shared import ApiModel
from pydantic import Field

from apiclient_front.models.common import FrontPage, Links


class ContactHandleSource(str, enum.Enum):
    TWITTER = "twitter"
    EMAIL = "email"
    PHONE = "phone"
    FACEBOOK = "facebook"
    INTERCOM = "intercom"
    FRONT_CHAT = "front_chat"
    CUSTOM = "custom"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class ContactHandle(ApiModel):
    handle: str
    source: ContactHandleSource


class ContactGroup(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str | None = None
    name: str | None = None
    is_private: bool | None = None


class ContactResponse(ApiModel):
    """A contact; `links` are the contact's own URLs, not API links."""

    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    name: str | None = None
    description: str | None = None
    avatar_url: str | None = None
    links: list[str] | None = None
    groups: list[ContactGroup] | None = None
    handles: list[ContactHandle] | None = None
    custom_fields: dict[str, Any] | None = None
    is_private: bool | None = None


class Contact(ApiModel):
    """Editable contact fields (body of an update)."""

    name: str | None = None
    description: str | None = None
    avatar: str | None = None
    is_spammer: bool | None = None
    links: list[str] | None = None
    group_names: list[str] | None = None
    custom_fields: dict[str, Any] | None = None


class CreateContact(Contact):
    handles: list[ContactHandle]


class MergeContacts(ApiModel):
    """Merge `contact_ids` into `target_contact_id` (or the first id)."""

    target_contact_id: str | None = None
    contact_ids: list[str]


class ListContactsResponse(FrontPage):
    results: list[ContactResponse] = Field(default_factory=list, alias="_results")
