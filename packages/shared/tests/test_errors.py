"""Error taxonomy rendering, status access, and config helpers."""

from unittest.mock import patch

import pytest
from apiclient_shared import (
    ApiError,
    CommunicationError,
    DeserializationError,
    InvalidRequestError,
    RequestBuildError,
    ServerError,
    UnexpectedResponseError,
)
from apiclient_shared.config import ClientConfig, optional_env, require_env


class TestErrors:
    def test_client_side_errors_have_no_status(self):
        for error in (
            InvalidRequestError("page_size too small"),
            RequestBuildError("bad url"),
            CommunicationError("connection reset"),
        ):
            assert isinstance(error, ApiError)
            assert error.status is None

    def test_messages_are_prefixed(self):
        assert str(InvalidRequestError("x")) == "Invalid Request: x"
        assert str(RequestBuildError("x")) == "Request Error: x"
        assert str(CommunicationError("x")) == "Communication Error: x"

    def test_server_error_keeps_body_and_status(self):
        error = ServerError('{"error": "nope"}', 422)
        assert error.status == 422
        assert error.body == '{"error": "nope"}'
        assert str(error).startswith("Server Error (422)")

    def test_deserialization_error_includes_detail(self):
        error = DeserializationError("{}", 200, detail="id: Field required")
        assert error.status == 200
        assert "Serde Error (200): id: Field required" in str(error)

    def test_unexpected_response(self):
        error = UnexpectedResponseError("", 302)
        assert str(error) == "Unexpected Response (302)"


class TestConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.timeout == 600
        assert config.connect_timeout == 60
        assert config.max_retries == 3

    def test_require_env_missing(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR"):
                require_env("MISSING_VAR")

    def test_require_env_present(self):
        with patch.dict("os.environ", {"SOME_TOKEN": "abc"}):
            assert require_env("SOME_TOKEN") == "abc"

    def test_optional_env_default(self):
        with patch.dict("os.environ", {"SOME_HOST": ""}):
            assert optional_env("SOME_HOST", "https://default") == "https://default"
