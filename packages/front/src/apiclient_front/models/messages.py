"""Message models."""

from typing import Any

from apiclient_shared import ApiModel
from pydantic import Field

from apiclient_front.models.common import FrontList, FrontPage, Links
from apiclient_front.models.conversations import RecipientResponse
from apiclient_front.models.teammates import TeammateResponse


class Attachment(ApiModel):
    """Attachment metadata; `url` is the download link for its content."""

    id: str | None = None
    filename: str | None = None
    url: str | None = None
    content_type: str | None = None
    size: int | None = None
    metadata: dict[str, Any] | None = None


class MessageResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    id: str
    type: str | None = None
    is_inbound: bool | None = None
    draft_mode: str | None = None
    error_type: str | None = None
    version: str | None = None
    created_at: float | None = None
    subject: str | None = None
    blurb: str | None = None
    author: TeammateResponse | None = None
    recipients: list[RecipientResponse] | None = None
    body: str | None = None
    text: str | None = None
    attachments: list[Attachment] | None = None
    signature: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


class ReplyOptions(ApiModel):
    tag_ids: list[str] | None = None
    archive: bool | None = None


class OutboundReplyMessage(ApiModel):
    body: str
    to: list[str] | None = None
    cc: list[str] | None = None
    bcc: list[str] | None = None
    sender_name: str | None = None
    subject: str | None = None
    author_id: str | None = None
    channel_id: str | None = None
    text: str | None = None
    quote_body: str | None = None
    options: ReplyOptions | None = None


class SeenReceiptResponse(ApiModel):
    api_links: Links | None = Field(default=None, alias="_links")
    first_seen_at: str | None = None
    seen_by: dict[str, Any] | None = None


class GetMessageSeenStatusResponse(FrontList):
    results: list[SeenReceiptResponse] = Field(default_factory=list, alias="_results")


class MarkMessageSeenRequestBody(ApiModel):
    """Empty body; Front requires a JSON object on this endpoint."""


class ListConversationMessagesResponse(FrontPage):
    results: list[MessageResponse] = Field(default_factory=list, alias="_results")
