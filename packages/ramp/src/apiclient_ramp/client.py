"""Ramp API client.

Auth: OAuth2. The app's client id and secret (HTTP basic) exchange an
authorization code or refresh token for a bearer access token.
Pagination: `page.next` carrying `start`.
Base URL: https://api.ramp.com
"""

from __future__ import annotations

import asyncio
import base64
import logging
import uuid
from collections.abc import Iterable
from functools import cached_property
from urllib.parse import urlencode

import httpx
from apiclient_shared import (
    BaseClient,
    ClientConfig,
    InvalidRequestError,
    RequestBuildError,
    TokenStore,
)
from apiclient_shared.config import optional_env, require_env
from apiclient_shared.token import compute_expires_at

from apiclient_ramp.models import GrantType, TokenResponse
from apiclient_ramp.resources import (
    Bills,
    BusinessInfo,
    Cards,
    Cashbacks,
    Departments,
    Locations,
    Memos,
    Merchants,
    Receipts,
    Reimbursements,
    Statements,
    Tokens,
    Transactions,
    Users,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api.ramp.com"
TOKEN_URL = "https://api.ramp.com/v1/public/customer/token"
AUTHORIZE_URL = "https://app.ramp.com/v1/authorize"


class RampClient(BaseClient):
    """Client for the Ramp developer API."""

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        redirect_uri: str = "",
        token: str = "",
        refresh_token: str = "",
        *,
        base_url: str | None = None,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(token, base_url=base_url, config=config, transport=transport)
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token = TokenStore(access_token=token, refresh_token=refresh_token)
        self.auto_refresh = False
        self._refresh_lock = asyncio.Lock()

    def _default_base_url(self) -> str:
        return DEFAULT_HOST

    @classmethod
    def from_env(
        cls,
        token: str = "",
        refresh_token: str = "",
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RampClient:
        """Build a client from RAMP_CLIENT_ID, RAMP_CLIENT_SECRET, RAMP_REDIRECT_URI
        and the optional RAMP_HOST."""
        return cls(
            require_env("RAMP_CLIENT_ID"),
            require_env("RAMP_CLIENT_SECRET"),
            require_env("RAMP_REDIRECT_URI"),
            token,
            refresh_token,
            base_url=optional_env("RAMP_HOST", DEFAULT_HOST),
            config=config,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # OAuth
    # -------------------------------------------------------------------------

    def user_consent_url(self, scopes: Iterable[str] = ()) -> str:
        """URL that sends the user to Ramp to grant this app access.

        A fresh random `state` is generated on every call; the caller keeps it
        to check the redirect.
        """
        query = {
            "client_id": self.client_id,
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
            "state": str(uuid.uuid4()),
        }
        scope = " ".join(scopes)
        if scope:
            query["scope"] = scope
        return f"{AUTHORIZE_URL}?{urlencode(query)}"

    def basic_auth_headers(self) -> dict[str, str]:
        """Authorization header carrying the app's client credentials."""
        credentials = f"{self.client_id}:{self.client_secret}".encode()
        return {"Authorization": f"Basic {base64.b64encode(credentials).decode()}"}

    async def _token_grant(self, form: dict[str, str]) -> TokenResponse:
        headers = {"Accept": "application/json", **self.basic_auth_headers()}
        try:
            request = self._get_client().build_request(
                "POST", TOKEN_URL, data=form, headers=headers
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestBuildError(f"POST {TOKEN_URL}: {e}") from e
        response = await self._send(request)
        return self._handle_response(response, TokenResponse)

    async def _store(self, grant: TokenResponse, refresh_token: str) -> None:
        await self.token.set(
            grant.access_token, refresh_token, compute_expires_at(grant.expires_in)
        )

    async def get_access_token(self, code: str, state: str) -> TokenResponse:
        """Exchange an authorization code for tokens and store them on the client."""
        grant = await self._token_grant(
            {
                "grant_type": GrantType.AUTHORIZATION_CODE.value,
                "code": code,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": self.redirect_uri,
                "state": state,
            }
        )
        await self._store(grant, grant.refresh_token)
        logger.info("Obtained Ramp access token from authorization code")
        return grant

    async def refresh_access_token(self) -> TokenResponse:
        """Use the stored refresh token to obtain a new access token.

        The refresh token itself is kept; Ramp does not rotate it.

        Raises:
            InvalidRequestError: No refresh token is stored.
        """
        refresh_token = await self.token.refresh_token()
        if not refresh_token:
            raise InvalidRequestError("refresh token cannot be empty")
        grant = await self._token_grant(
            {
                "grant_type": GrantType.REFRESH_TOKEN.value,
                "refresh_token": refresh_token,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": self.redirect_uri,
            }
        )
        await self._store(grant, refresh_token)
        logger.info("Refreshed Ramp access token")
        return grant

    def set_auto_access_token_refresh(self, enabled: bool) -> RampClient:
        """Refresh an expired access token before sending a request."""
        self.auto_refresh = enabled
        return self

    async def set_expires_at(self, expires_at: float | None) -> None:
        """Set the expiry as a time.monotonic() deadline, or None if unknown."""
        await self.token.set_expires_at(expires_at)

    async def expires_at(self) -> float | None:
        return await self.token.expires_at()

    async def set_expires_in(self, expires_in: float) -> None:
        """Set the expiry from a lifetime in seconds, less the refresh threshold."""
        await self.token.set_expires_at(compute_expires_at(expires_in))

    async def expires_in(self) -> float | None:
        return await self.token.expires_in()

    async def is_expired(self) -> bool | None:
        return await self.token.is_expired()

    async def _prepare_request(self) -> None:
        if not self.auto_refresh:
            return
        async with self._refresh_lock:
            # A concurrent request may have refreshed while this one waited.
            if await self.is_expired():
                await self.refresh_access_token()

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------

    @cached_property
    def statements(self) -> Statements:
        return Statements(self)

    @cached_property
    def business(self) -> BusinessInfo:
        return BusinessInfo(self)

    @cached_property
    def cards(self) -> Cards:
        return Cards(self)

    @cached_property
    def departments(self) -> Departments:
        return Departments(self)

    @cached_property
    def users(self) -> Users:
        return Users(self)

    @cached_property
    def transactions(self) -> Transactions:
        return Transactions(self)

    @cached_property
    def reimbursements(self) -> Reimbursements:
        return Reimbursements(self)

    @cached_property
    def receipts(self) -> Receipts:
        return Receipts(self)

    @cached_property
    def bills(self) -> Bills:
        return Bills(self)

    @cached_property
    def cashbacks(self) -> Cashbacks:
        return Cashbacks(self)

    @cached_property
    def memos(self) -> Memos:
        return Memos(self)

    @cached_property
    def locations(self) -> Locations:
        return Locations(self)

    @cached_property
    def merchants(self) -> Merchants:
        return Merchants(self)

    @cached_property
    def tokens(self) -> Tokens:
        return Tokens(self)
