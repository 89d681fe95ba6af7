"""Front resource accessors, one class per endpoint group."""

from apiclient_front.resources.attachments import Attachments
from apiclient_front.resources.contacts import Contacts
from apiclient_front.resources.conversations import Conversations
from apiclient_front.resources.messages import Messages
from apiclient_front.resources.tags import Tags
from apiclient_front.resources.teammates import Teammates
from apiclient_front.resources.token_identity import TokenIdentity

__all__ = [
    "Attachments",
    "Contacts",
    "Conversations",
    "Messages",
    "Tags",
    "Teammates",
    "TokenIdentity",
]
