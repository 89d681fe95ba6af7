"""HubSpot client tests with mocked HTTP.

Covers the generic CRM object accessor (bound to contacts and tickets), the
batch size limit, search request serialization, and user provisioning.
"""

import logging
from datetime import datetime, timezone
from unittest.mock import patch

import httpx
import pytest
from apiclient_hubspot import HubSpotClient
from apiclient_hubspot.models import (
    BatchInputSimplePublicObjectBatchInput,
    BatchInputSimplePublicObjectId,
    BatchStatus,
    Filter,
    FilterGroup,
    IdProperty,
    Operator,
    PublicGdprDeleteInput,
    PublicMergeInput,
    PublicObjectSearchRequest,
    PublicUserUpdate,
    SimplePublicObjectBatchInput,
    SimplePublicObjectId,
    SimplePublicObjectInput,
    UserProvisionRequest,
)
from apiclient_shared import InvalidRequestError, ServerError


def _client(transport) -> HubSpotClient:
    return HubSpotClient("pat-na1-token", transport=transport)


class TestFromEnv:
    def test_reads_token(self):
        with patch.dict("os.environ", {"HUBSPOT_API_TOKEN": "pat-env"}, clear=True):
            client = HubSpotClient.from_env()
        assert client.base_url == "https://api.hubspot.com"
        assert client.token._token.access_token == "pat-env"

    def test_missing_token_raises(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="HUBSPOT_API_TOKEN"):
                HubSpotClient.from_env()


# ---------------------------------------------------------------------------
# CRM objects
# ---------------------------------------------------------------------------


class TestCrmObjects:
    async def test_get_page_query_and_parsing(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("contacts_page.json")))

        page = await _client(transport).contacts.get_page(
            limit=2,
            properties=["email", "firstname"],
            associations=["companies"],
            archived=False,
        )

        request = transport.last_request
        assert request.url.path == "/crm/v3/objects/contacts"
        assert request.url.params["properties"] == "email,firstname"
        assert request.url.params["associations"] == "companies"
        assert request.url.params["archived"] == "false"
        assert request.url.params["limit"] == "2"
        assert "after" not in request.url.params

        ada = page.results[0]
        assert ada.properties["email"] == "ada@example.com"
        assert ada.properties["phone"] is None
        assert ada.created_at == datetime(2023, 3, 14, 9, 12, 1, 446000, tzinfo=timezone.utc)
        assert ada.associations["companies"].results[0].type == "contact_to_company"
        assert page.next_cursor() == "53"

    async def test_last_page_has_no_cursor(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"results": []}))
        page = await _client(transport).tickets.get_page(after="53")

        assert transport.last_request.url.params["after"] == "53"
        assert not page.has_more_pages()

    async def test_get_by_id_with_id_property(self, mock_transport, load_fixture):
        contact = load_fixture("contacts_page.json")["results"][0]
        transport = mock_transport(httpx.Response(200, json=contact))

        result = await _client(transport).contacts.get_by_id(
            "ada@example.com", id_property="email", properties_with_history=["lifecyclestage"]
        )

        request = transport.last_request
        assert request.url.path == "/crm/v3/objects/contacts/ada@example.com"
        assert request.url.params["idProperty"] == "email"
        assert request.url.params["propertiesWithHistory"] == "lifecyclestage"
        assert result.id == "51"

    async def test_update_sends_properties(self, mock_transport):
        payload = {
            "id": "1201",
            "properties": {"hs_pipeline_stage": "4"},
            "createdAt": "2023-05-01T12:00:00Z",
            "updatedAt": "2023-05-02T12:00:00Z",
        }
        transport = mock_transport(httpx.Response(200, json=payload))

        ticket = await _client(transport).tickets.update(
            "1201", SimplePublicObjectInput(properties={"hs_pipeline_stage": "4"})
        )

        assert transport.last_request.method == "PATCH"
        assert transport.last_request.url.path == "/crm/v3/objects/tickets/1201"
        assert transport.last_json() == {"properties": {"hs_pipeline_stage": "4"}}
        assert ticket.properties["hs_pipeline_stage"] == "4"

    async def test_merge_uses_camel_case(self, mock_transport, load_fixture):
        contact = load_fixture("contacts_page.json")["results"][0]
        transport = mock_transport(httpx.Response(200, json=contact))

        await _client(transport).contacts.merge(
            PublicMergeInput(primary_object_id="51", object_id_to_merge="52")
        )

        assert transport.last_request.url.path == "/crm/v3/objects/contacts/merge"
        assert transport.last_json() == {"primaryObjectId": "51", "objectIdToMerge": "52"}

    async def test_archive(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        assert await _client(transport).tickets.archive("1201") is None
        assert transport.last_request.method == "DELETE"

    async def test_gdpr_purge(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        await _client(transport).contacts.gdpr_purge(
            PublicGdprDeleteInput(object_id="ada@example.com", id_property="email")
        )

        assert transport.last_request.url.path == "/crm/v3/objects/contacts/gdpr-delete"
        assert transport.last_json() == {"objectId": "ada@example.com", "idProperty": "email"}

    async def test_other_object_types(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"results": []}))
        await _client(transport).objects("companies").get_page()

        assert transport.last_request.url.path == "/crm/v3/objects/companies"

    async def test_rate_limited(self, mock_transport):
        transport = mock_transport(
            httpx.Response(429, json={"status": "error", "category": "RATE_LIMITS"})
        )
        with pytest.raises(ServerError) as exc_info:
            await _client(transport).contacts.get_page()
        assert exc_info.value.status == 429
        assert len(transport.requests) == 1


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------


class TestBatch:
    async def test_batch_over_limit_rejected_before_sending(self, mock_transport):
        transport = mock_transport()
        body = BatchInputSimplePublicObjectId(
            inputs=[SimplePublicObjectId(id=str(i)) for i in range(101)]
        )

        with pytest.raises(InvalidRequestError, match="101"):
            await _client(transport).contacts.batch_archive(body)

        assert transport.requests == []

    async def test_batch_at_limit_is_sent(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        body = BatchInputSimplePublicObjectId(
            inputs=[SimplePublicObjectId(id=str(i)) for i in range(100)]
        )

        await _client(transport).tickets.batch_archive(body)

        assert transport.last_request.url.path == "/crm/v3/objects/tickets/batch/archive"
        assert len(transport.last_json()["inputs"]) == 100

    async def test_partial_failure_is_returned(self, mock_transport, load_fixture, caplog):
        transport = mock_transport(httpx.Response(207, json=load_fixture("batch_partial.json")))
        body = BatchInputSimplePublicObjectBatchInput(
            inputs=[
                SimplePublicObjectBatchInput(id="51", properties={"firstname": "Augusta"}),
                SimplePublicObjectBatchInput(id="999", properties={"firstname": "Nobody"}),
            ]
        )

        with caplog.at_level(logging.WARNING):
            result = await _client(transport).contacts.batch_update(body)

        assert result.status is BatchStatus.COMPLETE
        assert result.num_errors == 1
        assert result.errors[0].category == "OBJECT_NOT_FOUND"
        assert result.errors[0].context == {"ids": ["999"]}
        assert "1 of 2 inputs failed" in caplog.text


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class TestSearch:
    async def test_search_body(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("search_tickets.json")))
        request = PublicObjectSearchRequest(
            filter_groups=[
                FilterGroup(
                    filters=[
                        Filter(
                            property_name="hs_ticket_priority",
                            operator=Operator.IN,
                            values=["HIGH", "MEDIUM"],
                        ),
                        Filter(
                            property_name="createdate",
                            operator=Operator.BETWEEN,
                            value="2023-05-01",
                            high_value="2023-05-31",
                        ),
                    ]
                )
            ],
            properties=["subject"],
            limit=50,
        )

        result = await _client(transport).tickets.search(request)

        assert transport.last_request.url.path == "/crm/v3/objects/tickets/search"
        assert transport.last_json() == {
            "filterGroups": [
                {
                    "filters": [
                        {
                            "propertyName": "hs_ticket_priority",
                            "operator": "IN",
                            "values": ["HIGH", "MEDIUM"],
                        },
                        {
                            "propertyName": "createdate",
                            "operator": "BETWEEN",
                            "value": "2023-05-01",
                            "highValue": "2023-05-31",
                        },
                    ]
                }
            ],
            "sorts": [],
            "properties": ["subject"],
            "limit": 50,
        }
        assert result.total == 1
        assert result.results[0].properties["subject"] == "Printer on fire"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class TestUsers:
    async def test_get_page(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("users_page.json")))

        page = await _client(transport).users.get_page(limit=10)

        assert transport.last_request.url.path == "/settings/v3/users/"
        user = page.results[0]
        assert user.first_name == "Turanga"
        assert user.role_ids == ["112"]
        assert user.super_admin is True
        assert not page.has_more_pages()

    async def test_create(self, mock_transport):
        transport = mock_transport(
            httpx.Response(201, json={"id": "4611", "email": "fry@planet-express.com"})
        )

        user = await _client(transport).users.create(
            UserProvisionRequest(email="fry@planet-express.com", send_welcome_email=True)
        )

        assert user.id == "4611"
        assert transport.last_json() == {
            "email": "fry@planet-express.com",
            "sendWelcomeEmail": True,
        }

    async def test_get_by_email(self, mock_transport):
        transport = mock_transport(
            httpx.Response(200, json={"id": "4610", "email": "leela@planet-express.com"})
        )

        await _client(transport).users.get_by_id(
            "leela@planet-express.com", id_property=IdProperty.EMAIL
        )

        assert transport.last_request.url.params["idProperty"] == "EMAIL"

    async def test_replace(self, mock_transport):
        transport = mock_transport(
            httpx.Response(200, json={"id": "4610", "email": "leela@planet-express.com"})
        )

        await _client(transport).users.replace("4610", PublicUserUpdate(role_id="113"))

        assert transport.last_request.method == "PUT"
        assert transport.last_json() == {"roleId": "113"}

    async def test_roles_and_teams(self, mock_transport):
        transport = mock_transport(
            httpx.Response(
                200, json={"results": [{"id": "112", "name": "Admin", "requiresBillingWrite": True}]}
            ),
            httpx.Response(
                200,
                json={
                    "results": [
                        {"id": "77", "name": "Delivery", "userIds": ["4610"], "secondaryUserIds": []}
                    ]
                },
            ),
        )
        client = _client(transport)

        roles = await client.users.list_roles()
        teams = await client.users.list_teams()

        assert roles.results[0].requires_billing_write is True
        assert teams.results[0].user_ids == ["4610"]
        assert [r.url.path for r in transport.requests] == [
            "/settings/v3/users/roles",
            "/settings/v3/users/teams",
        ]
