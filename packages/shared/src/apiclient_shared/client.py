"""Base client: the shared request pipeline for every service client.

The ABC holds the pieces every generated-style accessor needs and turns one
upstream endpoint call into one method call:

  - URL building: base URL + path, `{name}` placeholders filled from path
    parameters, query parameters added only for arguments that were supplied
  - Bearer auth read from a TokenStore under its shared lock
  - Retry with exponential backoff via tenacity, for transport failures only
  - Response mapping: success → parsed model, error status → ServerError,
    unparsable success body → DeserializationError

Each call is a single request/response round trip. HTTP error statuses are
never retried and list endpoints are never auto-paginated; the caller follows
the cursor on the returned page.

A new service = a subclass with a default base URL and accessor properties.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date, datetime
from functools import lru_cache
from typing import Any, TypeVar, overload
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from apiclient_shared.config import ClientConfig
from apiclient_shared.errors import (
    CommunicationError,
    DeserializationError,
    InvalidRequestError,
    RequestBuildError,
    ServerError,
    UnexpectedResponseError,
)
from apiclient_shared.token import TokenStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=512)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def format_query_value(value: Any) -> str:
    """Render one query parameter value the way the upstream APIs expect."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(format_query_value(v) for v in value)
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Keep only the parameters that were supplied, in declaration order."""
    if not params:
        return []
    return [(key, format_query_value(value)) for key, value in params.items() if value is not None]


class BaseClient(ABC):
    """Abstract base for the Front, HubSpot and Ramp clients.

    Subclasses provide the default base URL and expose resource accessors.
    The base class handles HTTP client lifecycle, auth, retries, and response
    mapping.
    """

    def __init__(
        self,
        token: str = "",
        *,
        base_url: str | None = None,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = (base_url or self._default_base_url()).rstrip("/")
        self.token = TokenStore(access_token=token)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.request_count: int = 0

    @abstractmethod
    def _default_base_url(self) -> str:
        """Default API base URL for this service."""

    def set_base_url(self, base_url: str) -> None:
        """Point the client at a different host (trailing slashes are trimmed)."""
        self.base_url = base_url.rstrip("/")

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self.config.user_agent},
                timeout=httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> BaseClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def build_url(self, path: str, path_params: Mapping[str, Any] | None = None) -> str:
        """Join the base URL and path, substituting `{name}` placeholders."""
        for name, value in (path_params or {}).items():
            text = "" if value is None else str(value)
            if not text:
                raise InvalidRequestError(f"path parameter '{name}' must not be empty")
            path = path.replace(f"{{{name}}}", quote(text, safe=""))
        if path.startswith(("https://", "http://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _prepare_request(self) -> None:
        """Hook run before every request (Ramp refreshes expired tokens here)."""

    async def _auth_headers(self) -> dict[str, str]:
        access_token = await self.token.access_token()
        return {"Authorization": f"Bearer {access_token}"}

    async def _send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, retrying transport failures with exponential backoff."""
        client = self._get_client()
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(httpx.TransportError),
            wait=wait_exponential(
                multiplier=1, min=self.config.retry_wait_min, max=self.config.retry_wait_max
            ),
            stop=stop_after_attempt(self.config.max_retries + 1),
            before_sleep=self._log_retry,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    self.request_count += 1
                    response = await client.send(request)
        except (httpx.TransportError, RetryError) as e:
            raise CommunicationError(f"{request.method} {request.url}: {e}") from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    @staticmethod
    def _log_retry(retry_state: Any) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(f"Transport error on attempt {retry_state.attempt_number}, retrying: {exc}")

    async def request_raw(
        self,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        form: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Build, authenticate and send one request; return the raw response.

        `form` sends a url-encoded body instead of JSON. Entries in `headers`
        override the defaults, including the bearer Authorization header.
        """
        url = self.build_url(path, path_params)
        await self._prepare_request()

        request_headers = {"Accept": "application/json"}
        if form is None:
            request_headers["Content-Type"] = "application/json"
        request_headers.update(await self._auth_headers())
        request_headers.update(headers or {})
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        try:
            request = self._get_client().build_request(
                method,
                url,
                params=build_query(params),
                json=body,
                data=form,
                headers=request_headers,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestBuildError(f"{method} {url}: {e}") from e
        return await self._send(request)

    @overload
    async def request(
        self,
        method: str,
        path: str,
        response_type: type[T],
        *,
        path_params: Mapping[str, Any] | None = ...,
        params: Mapping[str, Any] | None = ...,
        body: Any = ...,
        form: Mapping[str, str] | None = ...,
        headers: Mapping[str, str] | None = ...,
    ) -> T: ...

    @overload
    async def request(
        self,
        method: str,
        path: str,
        response_type: None = ...,
        *,
        path_params: Mapping[str, Any] | None = ...,
        params: Mapping[str, Any] | None = ...,
        body: Any = ...,
        form: Mapping[str, str] | None = ...,
        headers: Mapping[str, str] | None = ...,
    ) -> None: ...

    async def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        *,
        path_params: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        form: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Issue one API call and map the response to `response_type`.

        Returns:
            The parsed response, raw bytes when `response_type` is bytes, or
            None when the endpoint has no response body.

        Raises:
            InvalidRequestError: A path parameter was empty.
            RequestBuildError: The request could not be built.
            CommunicationError: Transport failure after retries.
            DeserializationError: Success status but the body did not parse.
            ServerError: 4xx/5xx status.
            UnexpectedResponseError: Any other status.
        """
        response = await self.request_raw(
            method,
            path,
            path_params=path_params,
            params=params,
            body=body,
            form=form,
            headers=headers,
        )
        return self._handle_response(response, response_type)

    @staticmethod
    def _handle_response(response: httpx.Response, response_type: Any) -> Any:
        status = response.status_code
        if response.is_success:
            if response_type is None:
                return None
            if response_type is bytes:
                return response.content
            text = response.text
            try:
                return _adapter(response_type).validate_json(text)
            except ValidationError as e:
                raise DeserializationError(text, status, detail=str(e)) from e
        if response.is_client_error or response.is_server_error:
            raise ServerError(response.text, status)
        raise UnexpectedResponseError(response.text, status)


class Resource:
    """Accessor for one group of endpoints, bound to a client."""

    def __init__(self, client: BaseClient) -> None:
        self.client = client
