"""Typed Pydantic models for Front API requests and responses."""

from apiclient_front.models.common import FrontList, FrontPage, Links, Pagination
from apiclient_front.models.contacts import (
    Contact,
    ContactGroup,
    ContactHandle,
    ContactHandleSource,
    ContactResponse,
    CreateContact,
    ListContactsResponse,
    MergeContacts,
    SortOrder,
)
from apiclient_front.models.conversations import (
    AddConversationFollowersRequestBody,
    AddConversationLinkRequestBody,
    Comment,
    ConversationResponse,
    ConversationStatus,
    CreateConversation,
    DeleteConversationFollowersRequestBody,
    EventResponse,
    LinkResponse,
    ListConversationEventsResponse,
    ListConversationFollowersResponse,
    ListConversationInboxesResponse,
    ListConversationsResponse,
    RecipientResponse,
    RecipientRole,
    Reminder,
    RemoveConversationLinkRequestBody,
    SearchConversationsResponse,
    TagIds,
    UpdateConversation,
    UpdateConversationAssignee,
    UpdateConversationReminders,
    UpdateConversationStatus,
)
from apiclient_front.models.messages import (
    Attachment,
    GetMessageSeenStatusResponse,
    ListConversationMessagesResponse,
    MarkMessageSeenRequestBody,
    MessageResponse,
    OutboundReplyMessage,
    ReplyOptions,
    SeenReceiptResponse,
)
from apiclient_front.models.tags import (
    CreateTag,
    Highlight,
    ListTagsResponse,
    TagResponse,
    UpdateTag,
)
from apiclient_front.models.teammates import (
    IdentityResponse,
    InboxResponse,
    ListTeammateInboxesResponse,
    ListTeammatesResponse,
    TeammateResponse,
    UpdateTeammate,
)

__all__ = [
    "AddConversationFollowersRequestBody",
    "AddConversationLinkRequestBody",
    "Attachment",
    "Comment",
    "Contact",
    "ContactGroup",
    "ContactHandle",
    "ContactHandleSource",
    "ContactResponse",
    "ConversationResponse",
    "ConversationStatus",
    "CreateContact",
    "CreateConversation",
    "CreateTag",
    "DeleteConversationFollowersRequestBody",
    "EventResponse",
    "FrontList",
    "FrontPage",
    "GetMessageSeenStatusResponse",
    "Highlight",
    "IdentityResponse",
    "InboxResponse",
    "LinkResponse",
    "Links",
    "ListContactsResponse",
    "ListConversationEventsResponse",
    "ListConversationFollowersResponse",
    "ListConversationInboxesResponse",
    "ListConversationMessagesResponse",
    "ListConversationsResponse",
    "ListTagsResponse",
    "ListTeammateInboxesResponse",
    "ListTeammatesResponse",
    "MarkMessageSeenRequestBody",
    "MergeContacts",
    "MessageResponse",
    "OutboundReplyMessage",
    "Pagination",
    "RecipientResponse",
    "RecipientRole",
    "Reminder",
    "RemoveConversationLinkRequestBody",
    "ReplyOptions",
    "SearchConversationsResponse",
    "SeenReceiptResponse",
    "SortOrder",
    "TagIds",
    "TagResponse",
    "TeammateResponse",
    "UpdateConversation",
    "UpdateConversationAssignee",
    "UpdateConversationReminders",
    "UpdateConversationStatus",
    "UpdateTag",
    "UpdateTeammate",
]
