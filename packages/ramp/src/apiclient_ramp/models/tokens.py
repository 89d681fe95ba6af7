"""OAuth token exchange models."""

import enum

from apiclient_shared import ApiModel
from pydantic import AliasChoices, Field


class GrantType(str, enum.Enum):
    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"


class TokenTypeHint(str, enum.Enum):
    ACCESS_TOKEN = "access_token"
    REFRESH_TOKEN = "refresh_token"


class TokenRequestBody(ApiModel):
    """Token grant. Which fields are required depends on `grant_type`:

    - authorization_code: `code` and `redirect_uri`
    - refresh_token: `refresh_token`
    - client_credentials: `scope` (space-separated)
    """

    grant_type: GrantType
    scope: str | None = None
    code: str | None = None
    redirect_uri: str | None = None
    refresh_token: str | None = None


class TokenResponse(ApiModel):
    access_token: str = ""
    token_type: str = ""
    expires_in: int = 0
    scope: str = ""
    refresh_token: str = ""
    refresh_token_expires_in: int = Field(
        default=0,
        validation_alias=AliasChoices("refresh_token_expires_in", "x_refresh_token_expires_in"),
    )


class TokenRevokeRequestBody(ApiModel):
    token: str
    token_type_hint: TokenTypeHint | None = None
