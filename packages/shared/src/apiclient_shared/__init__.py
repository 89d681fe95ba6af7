"""Shared infrastructure for the generated-style API clients.

Provides the HTTP client base class, the error taxonomy, the token store, and
the Pydantic base model and field types used by every service package.
"""

from apiclient_shared.base64data import Base64Data
from apiclient_shared.client import BaseClient, Resource
from apiclient_shared.config import ClientConfig
from apiclient_shared.errors import (
    ApiError,
    CommunicationError,
    DeserializationError,
    InvalidRequestError,
    RequestBuildError,
    ServerError,
    UnexpectedResponseError,
)
from apiclient_shared.models import ApiModel
from apiclient_shared.pagination import CursorPage
from apiclient_shared.phone import PhoneNumber
from apiclient_shared.token import TokenStore

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiModel",
    "Base64Data",
    "BaseClient",
    "ClientConfig",
    "CommunicationError",
    "CursorPage",
    "DeserializationError",
    "InvalidRequestError",
    "PhoneNumber",
    "RequestBuildError",
    "Resource",
    "ServerError",
    "TokenStore",
    "UnexpectedResponseError",
]
