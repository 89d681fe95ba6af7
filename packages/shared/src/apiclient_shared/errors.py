"""Error taxonomy for every client method.

Accessor methods either return the typed response or raise one of these.
Nothing is recovered internally; the caller decides what to do.

  InvalidRequestError: rejected client-side before anything was sent
  RequestBuildError: the request could not be constructed
  CommunicationError: transport failure (after transport retries)
  DeserializationError: success status, but the body did not parse
  ServerError: 4xx/5xx status
  UnexpectedResponseError: any status outside the documented cases

Errors that come from a response keep the raw body and status code so callers
can log or inspect the upstream payload.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for all client errors."""

    @property
    def status(self) -> int | None:
        """HTTP status code, if the error was produced from a response."""
        return None


class InvalidRequestError(ApiError):
    """The request did not conform to API requirements."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid Request: {message}")
        self.message = message


class RequestBuildError(ApiError):
    """The request could not be built (bad URL, unserializable body, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Request Error: {message}")
        self.message = message


class CommunicationError(ApiError):
    """The request was built but the server could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Communication Error: {message}")
        self.message = message


class _ResponseError(ApiError):
    """An error carrying the raw response body and status code."""

    label = "Response Error"

    def __init__(self, body: str, status: int, detail: str = "") -> None:
        self.body = body
        self.status_code = status
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        text = f"{self.label} ({self.status_code})"
        if self.detail:
            text += f": {self.detail}"
        if self.body:
            text += f"\n{self.body}"
        return text

    @property
    def status(self) -> int | None:
        return self.status_code


class DeserializationError(_ResponseError):
    """A successful response whose body did not match the declared type."""

    label = "Serde Error"


class ServerError(_ResponseError):
    """The server answered with an error status."""

    label = "Server Error"


class UnexpectedResponseError(_ResponseError):
    """A response that is neither a success nor an error status."""

    label = "Unexpected Response"
