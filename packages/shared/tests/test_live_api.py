"""Live API tests against the real Front, HubSpot and Ramp services.

These hit the real APIs with real credentials, so they only run when the
matching environment variables are set (or present in a `.env` at the repo
root). Each service is skipped on its own when its credentials are missing.

Test tiers (run selectively via pytest markers):
  smoke:    Auth only. One cheap call that proves the credentials work.
  contract: One small page of data. Proves our models parse real responses.

Usage:
  pytest packages/shared/tests/test_live_api.py -v -m live -s
  pytest packages/shared/tests/test_live_api.py -v -m "live and smoke" -s
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from apiclient_front import FrontClient
from apiclient_hubspot import HubSpotClient
from apiclient_ramp import RampClient
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load .env for local development (CI sets env vars directly)
# ---------------------------------------------------------------------------
_project_root = Path(__file__).resolve().parents[3]
load_dotenv(_project_root / ".env")

pytestmark = pytest.mark.live

requires_front = pytest.mark.skipif(
    not os.environ.get("FRONT_API_TOKEN"),
    reason="FRONT_API_TOKEN not set, skipping live Front tests",
)
requires_hubspot = pytest.mark.skipif(
    not os.environ.get("HUBSPOT_API_TOKEN"),
    reason="HUBSPOT_API_TOKEN not set, skipping live HubSpot tests",
)
requires_ramp = pytest.mark.skipif(
    not all(
        os.environ.get(name)
        for name in ("RAMP_CLIENT_ID", "RAMP_CLIENT_SECRET", "RAMP_REDIRECT_URI", "RAMP_TOKEN")
    ),
    reason="Ramp app credentials or RAMP_TOKEN not set, skipping live Ramp tests",
)


def _report_requests(client, label: str) -> None:
    print(f"\n  [{label}] API requests: {client.request_count}")


# ---------------------------------------------------------------------------
# Front
# ---------------------------------------------------------------------------


@requires_front
class TestFrontLive:
    @pytest.mark.smoke
    async def test_token_identity(self):
        async with FrontClient.from_env() as client:
            identity = await client.token_identity.get()
            _report_requests(client, "Front smoke")
        assert identity.id

    @pytest.mark.contract
    async def test_contacts_page(self):
        async with FrontClient.from_env() as client:
            page = await client.contacts.list(limit=2)
            _report_requests(client, "Front contract")
        assert len(page.results) <= 2


# ---------------------------------------------------------------------------
# HubSpot
# ---------------------------------------------------------------------------


@requires_hubspot
class TestHubSpotLive:
    @pytest.mark.smoke
    async def test_list_roles(self):
        async with HubSpotClient.from_env() as client:
            await client.users.list_roles()
            _report_requests(client, "HubSpot smoke")

    @pytest.mark.contract
    async def test_contacts_page(self):
        async with HubSpotClient.from_env() as client:
            page = await client.contacts.get_page(limit=2, properties=["email"])
            _report_requests(client, "HubSpot contract")
        assert len(page.results) <= 2


# ---------------------------------------------------------------------------
# Ramp
# ---------------------------------------------------------------------------


@requires_ramp
class TestRampLive:
    @pytest.mark.smoke
    async def test_business(self):
        async with RampClient.from_env(os.environ["RAMP_TOKEN"]) as client:
            business = await client.business.get()
            _report_requests(client, "Ramp smoke")
        assert business.id

    @pytest.mark.contract
    async def test_transactions_page(self):
        async with RampClient.from_env(os.environ["RAMP_TOKEN"]) as client:
            page = await client.transactions.list(page_size=2)
            _report_requests(client, "Ramp contract")
        assert len(page.data) <= 2
