"""Client configuration shared by every service package.

Credentials never live here. Each service client reads its token from the
environment variable named by the service (FRONT_API_TOKEN, HUBSPOT_API_TOKEN,
RAMP_CLIENT_ID, ...) and only the transport tuning knobs are modelled below.

Defaults follow the upstream clients: a 600s request timeout, a 60s connect
timeout, and up to three retries of transport failures with exponential
backoff. HTTP error statuses are never retried.
"""

from __future__ import annotations

import os

from pydantic import BaseModel

USER_AGENT = "apiclient-python/0.1.0"


class ClientConfig(BaseModel):
    """Transport settings for a BaseClient."""

    timeout: float = 600.0
    connect_timeout: float = 60.0
    max_retries: int = 3
    retry_wait_min: float = 1.0
    retry_wait_max: float = 30.0
    user_agent: str = USER_AGENT


def require_env(name: str) -> str:
    """Read a required environment variable or raise ValueError."""
    value = os.environ.get(name, "")
    if not value:
        raise ValueError(f"Environment variable '{name}' is not set or empty")
    return value


def optional_env(name: str, default: str) -> str:
    """Read an optional environment variable, falling back to the default."""
    return os.environ.get(name) or default
