"""Conversation, inbox membership and event models."""

import enum
from typing import Any

from apiclient_shared import ApiModel
from pydantic import Field

from apiclient_front.models.common import FrontList, FrontPage, Links
from apiclient_front.models.tags import TagResponse
from apiclient_front.models.teammates import InboxResponse, TeammateResponse


class ConversationStatus(str, enum.Enum):
    ARCHIVED = "archived"
    UNASSIGNED = "unassigned"
    DELETED = "deleted"
    ASSIGNED = "assigned"


class RecipientRole(str, enum.Enum):
    FROM = "from"
    TO = "to"
    CC = "cc"
    BCC = "bcc"


class RecipientResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    name: str | None = None
    handle: str | None = None
    role: RecipientRole | None = None


class LinkResponse(ApiModel):
    """An external link attached to conversations."""

    api_links: Links | None = Field(default=None, alias="_links")
    id: str | None = None
    name: str | None = None
    type: str | None = None
    external_url: str | None = None


class Reminder(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    created_at: float | None = None
    scheduled_at: float | None = None
    updated_at: float | None = None


class ConversationResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    subject: str | None = None
    status: ConversationStatus | None = None
    assignee: TeammateResponse | None = None
    recipient: RecipientResponse | None = None
    tags: list[TagResponse] | None = None
    links: list[LinkResponse] | None = None
    created_at: float | None = None
    is_private: bool | None = None
    scheduled_reminders: list[Reminder] | None = None
    metadata: dict[str, Any] | None = None


class Comment(ApiModel):
    author_id: str | None = None
    body: str
    attachments: list[str] | None = None


class CreateConversation(ApiModel):
    """Create a discussion conversation with an initial comment."""

    type: str = "discussion"
    inbox_id: str | None = None
    teammate_ids: list[str] | None = None
    subject: str
    comment: Comment


class UpdateConversationStatus(str, enum.Enum):
    ARCHIVED = "archived"
    OPEN = "open"
    DELETED = "deleted"
    SPAM = "spam"


class UpdateConversation(ApiModel):
    assignee_id: str | None = None
    inbox_id: str | None = None
    status: UpdateConversationStatus | None = None
    tag_ids: list[str] | None = None


class UpdateConversationAssignee(ApiModel):
    """Assign to a teammate; an empty-string id unassigns."""

    assignee_id: str


class TagIds(ApiModel):
    tag_ids: list[str]


class AddConversationLinkRequestBody(ApiModel):
    link_ids: list[str] | None = None
    link_external_urls: list[str] | None = None


class RemoveConversationLinkRequestBody(ApiModel):
    link_ids: list[str]


class AddConversationFollowersRequestBody(ApiModel):
    teammate_ids: list[str]


class DeleteConversationFollowersRequestBody(ApiModel):
    teammate_ids: list[str]


class UpdateConversationReminders(ApiModel):
    """Snooze for `teammate_id` until `scheduled_at`; omit it to cancel."""

    teammate_id: str
    scheduled_at: str | None = None


class EventResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    type: str | None = None
    emitted_at: float | None = None
    source: dict[str, Any] | None = None
    target: dict[str, Any] | None = None
    conversation: ConversationResponse | None = None


class ListConversationsResponse(FrontPage):
    results: list[ConversationResponse] = Field(default_factory=list, alias="_results")


class SearchConversationsResponse(ListConversationsResponse):
    total: int | None = Field(default=None, alias="_total")


class ListConversationInboxesResponse(FrontList):
    results: list[InboxResponse] = Field(default_factory=list, alias="_results")


class ListConversationFollowersResponse(FrontList):
    results: list[TeammateResponse] = Field(default_factory=list, alias="_results")


class ListConversationEventsResponse(FrontPage):
    results: list[EventResponse] = Field(default_factory=list, alias="_results")
