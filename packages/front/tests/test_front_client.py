"""Front client tests with mocked HTTP.

Each accessor group is exercised through the same patterns:
  1. Request shape: method, path, query string, and JSON body
  2. Response parsing: fixture payloads into typed models
  3. Pagination: page_token extracted from `_pagination.next`
  4. Error handling: error statuses surface as typed errors

All HTTP calls are mocked via MockTransport; no real API calls.
"""

from unittest.mock import patch

import httpx
import pytest
from apiclient_front import FrontClient
from apiclient_front.models import (
    Comment,
    ContactHandle,
    ContactHandleSource,
    ConversationStatus,
    CreateContact,
    CreateConversation,
    CreateTag,
    Highlight,
    MergeContacts,
    OutboundReplyMessage,
    SortOrder,
    TagIds,
    UpdateConversationAssignee,
    UpdateConversationReminders,
)
from apiclient_shared import InvalidRequestError, ServerError


def _client(transport) -> FrontClient:
    return FrontClient("front-token", transport=transport)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestFromEnv:
    def test_reads_token_and_default_host(self):
        with patch.dict("os.environ", {"FRONT_API_TOKEN": "env-token"}, clear=True):
            client = FrontClient.from_env()
        assert client.base_url == "https://api2.frontapp.com"
        assert client.token._token.access_token == "env-token"

    def test_host_override(self):
        env = {"FRONT_API_TOKEN": "env-token", "FRONT_HOST": "http://localhost:9000/"}
        with patch.dict("os.environ", env, clear=True):
            client = FrontClient.from_env()
        assert client.base_url == "http://localhost:9000"

    def test_missing_token_raises(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="FRONT_API_TOKEN"):
                FrontClient.from_env()


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class TestContacts:
    async def test_list_parses_page(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("contacts_page.json")))
        client = _client(transport)

        page = await client.contacts.list(limit=2, sort_by="created_at", sort_order=SortOrder.DESC)

        request = transport.last_request
        assert request.method == "GET"
        assert request.url.path == "/contacts"
        assert request.url.params["limit"] == "2"
        assert request.url.params["sort_order"] == "desc"
        assert "page_token" not in request.url.params
        assert request.headers["Authorization"] == "Bearer front-token"

        assert [c.id for c in page.items()] == ["crd_1", "crd_2"]
        ada = page.results[0]
        assert ada.links == ["https://example.com/ada"]
        assert ada.api_links.self_ == "https://api2.frontapp.com/contacts/crd_1"
        assert ada.handles[0].source is ContactHandleSource.EMAIL
        assert page.results[1].model_extra == {"account_id": "acc_9"}

    async def test_next_cursor_from_pagination_url(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("contacts_page.json")))
        page = await _client(transport).contacts.list()

        assert page.has_more_pages()
        assert page.next_cursor() == "8a1c2f0b9e"

    async def test_follow_cursor(self, mock_transport, load_fixture):
        transport = mock_transport(
            httpx.Response(200, json=load_fixture("contacts_page.json")),
            httpx.Response(200, json={"_pagination": {"next": None}, "_results": []}),
        )
        client = _client(transport)

        first = await client.contacts.list(limit=2)
        last = await client.contacts.list(limit=2, page_token=first.next_cursor())

        assert transport.last_request.url.params["page_token"] == "8a1c2f0b9e"
        assert not last.has_more_pages()
        assert last.items() == []

    async def test_create_sends_body(self, mock_transport):
        transport = mock_transport(httpx.Response(201, json={"id": "crd_3", "name": "Alan"}))
        body = CreateContact(
            name="Alan",
            handles=[ContactHandle(handle="alan@example.com", source=ContactHandleSource.EMAIL)],
        )

        contact = await _client(transport).contacts.create(body)

        assert contact.id == "crd_3"
        assert transport.last_request.method == "POST"
        assert transport.last_json() == {
            "name": "Alan",
            "handles": [{"handle": "alan@example.com", "source": "email"}],
        }

    async def test_team_scoped_list(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"_results": []}))
        await _client(transport).contacts.list_team("tim_1", q='{"updated_after": 1}')

        assert transport.last_request.url.path == "/teams/tim_1/contacts"
        assert transport.last_request.url.params["q"] == '{"updated_after": 1}'

    async def test_get_by_alias_is_escaped(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"id": "crd_1"}))
        await _client(transport).contacts.get("alt:email:ada@example.com")

        assert transport.last_request.url.path == "/contacts/alt:email:ada@example.com"
        assert b"alt%3Aemail%3Aada%40example.com" in transport.last_request.url.raw_path

    async def test_delete_returns_none(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        result = await _client(transport).contacts.delete("crd_1")

        assert result is None
        assert transport.last_request.method == "DELETE"

    async def test_merge(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"id": "crd_1"}))
        await _client(transport).contacts.merge(MergeContacts(contact_ids=["crd_1", "crd_2"]))

        assert transport.last_request.url.path == "/contacts/merge"
        assert transport.last_json() == {"contact_ids": ["crd_1", "crd_2"]}

    async def test_empty_contact_id_rejected_before_sending(self, mock_transport):
        transport = mock_transport()
        with pytest.raises(InvalidRequestError):
            await _client(transport).contacts.get("")
        assert transport.requests == []


# ---------------------------------------------------------------------------
# Conversations
# ---------------------------------------------------------------------------


class TestConversations:
    async def test_get_by_id(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("conversation.json")))

        conversation = await _client(transport).conversations.get_by_id("cnv_55c8c149")

        assert conversation.status is ConversationStatus.ASSIGNED
        assert conversation.assignee.username == "leela"
        assert conversation.tags[0].highlight is Highlight.LIGHT_BLUE
        assert conversation.links[0].name == "JIRA-123"
        assert conversation.api_links.related["events"].endswith("/events")

    async def test_create(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(201, json=load_fixture("conversation.json")))
        body = CreateConversation(
            inbox_id="inb_1",
            subject="Invoice for March",
            comment=Comment(body="Can someone take this?"),
        )

        await _client(transport).conversations.create(body)

        assert transport.last_json() == {
            "type": "discussion",
            "inbox_id": "inb_1",
            "subject": "Invoice for March",
            "comment": {"body": "Can someone take this?"},
        }

    @pytest.mark.parametrize(
        ("method_name", "http_method", "suffix", "body"),
        [
            ("update_assignee", "PUT", "assignee", UpdateConversationAssignee(assignee_id="tea_1")),
            ("add_tag", "POST", "tags", TagIds(tag_ids=["tag_1"])),
            ("remove_tag", "DELETE", "tags", TagIds(tag_ids=["tag_1"])),
            (
                "update_reminders",
                "PATCH",
                "reminders",
                UpdateConversationReminders(teammate_id="tea_1"),
            ),
        ],
    )
    async def test_no_content_mutations(
        self, mock_transport, method_name, http_method, suffix, body
    ):
        transport = mock_transport(httpx.Response(204))
        method = getattr(_client(transport).conversations, method_name)

        assert await method("cnv_1", body) is None

        request = transport.last_request
        assert request.method == http_method
        assert request.url.path == f"/conversations/cnv_1/{suffix}"
        assert transport.last_json() == body.to_payload()

    async def test_update_accepts_plain_dict(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        await _client(transport).conversations.update("cnv_1", {"status": "archived"})

        assert transport.last_request.method == "PATCH"
        assert transport.last_json() == {"status": "archived"}

    async def test_search_puts_query_in_path(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("search_page.json")))

        result = await _client(transport).conversations.search("tag:tag_1 is:open", limit=10)

        assert transport.last_request.url.path == "/conversations/search/tag:tag_1 is:open"
        assert transport.last_request.url.params["limit"] == "10"
        assert result.total == 1
        assert result.results[0].status is ConversationStatus.ARCHIVED
        assert not result.has_more_pages()

    async def test_list_events(self, mock_transport):
        payload = {
            "_pagination": {"next": "https://api2.frontapp.com/conversations/cnv_1/events?page_token=ev2"},
            "_results": [{"id": "evt_1", "type": "assign", "emitted_at": 1682379003.0}],
        }
        transport = mock_transport(httpx.Response(200, json=payload))

        events = await _client(transport).conversations.list_events("cnv_1", limit=1)

        assert events.results[0].type == "assign"
        assert events.next_cursor() == "ev2"

    async def test_not_found(self, mock_transport):
        transport = mock_transport(
            httpx.Response(404, json={"_error": {"status": 404, "title": "Not found"}})
        )
        with pytest.raises(ServerError) as exc_info:
            await _client(transport).conversations.get_by_id("cnv_missing")
        assert exc_info.value.status == 404
        assert "Not found" in exc_info.value.body


# ---------------------------------------------------------------------------
# Messages, tags, teammates, identity, attachments
# ---------------------------------------------------------------------------


class TestMessages:
    async def test_reply(self, mock_transport):
        transport = mock_transport(
            httpx.Response(202, json={"id": "msg_1", "type": "email", "is_inbound": False})
        )
        message = await _client(transport).messages.reply_to_conversation(
            "cnv_1", OutboundReplyMessage(body="Thanks!", author_id="tea_1")
        )

        assert message.id == "msg_1"
        assert transport.last_request.url.path == "/conversations/cnv_1/messages"
        assert transport.last_json() == {"body": "Thanks!", "author_id": "tea_1"}

    async def test_mark_seen_sends_empty_object(self, mock_transport):
        transport = mock_transport(httpx.Response(204))
        await _client(transport).messages.mark_seen("msg_1")

        assert transport.last_request.url.path == "/messages/msg_1/seen"
        assert transport.last_json() == {}

    async def test_seen_status(self, mock_transport):
        payload = {"_results": [{"first_seen_at": "2023-04-25T10:00:00Z"}]}
        transport = mock_transport(httpx.Response(200, json=payload))

        status = await _client(transport).messages.get_seen_status("msg_1")

        assert status.results[0].first_seen_at == "2023-04-25T10:00:00Z"


class TestTags:
    async def test_create_child(self, mock_transport):
        transport = mock_transport(httpx.Response(201, json={"id": "tag_2", "name": "urgent"}))
        tag = await _client(transport).tags.create_child(
            "tag_1", CreateTag(name="urgent", highlight=Highlight.RED)
        )

        assert tag.name == "urgent"
        assert transport.last_request.url.path == "/tags/tag_1/children"
        assert transport.last_json() == {"name": "urgent", "highlight": "red"}

    async def test_list_tagged_conversations(self, mock_transport, load_fixture):
        transport = mock_transport(httpx.Response(200, json=load_fixture("search_page.json")))
        page = await _client(transport).tags.list_tagged_conversations("tag_1", limit=5)

        assert transport.last_request.url.path == "/tags/tag_1/conversations"
        assert page.results[0].id == "cnv_1"


class TestTeammatesAndIdentity:
    async def test_list_inboxes(self, mock_transport):
        payload = {"_results": [{"id": "inb_1", "name": "Support", "is_private": False}]}
        transport = mock_transport(httpx.Response(200, json=payload))

        inboxes = await _client(transport).teammates.list_inboxes("tea_1")

        assert inboxes.results[0].name == "Support"
        assert transport.last_request.url.path == "/teammates/tea_1/inboxes"

    async def test_token_identity(self, mock_transport):
        transport = mock_transport(httpx.Response(200, json={"id": "cmp_1", "name": "Planet Express"}))
        identity = await _client(transport).token_identity.get()

        assert identity.name == "Planet Express"
        assert transport.last_request.url.path == "/me"

    async def test_download_attachment(self, mock_transport):
        transport = mock_transport(
            httpx.Response(200, content=b"%PDF-1.7", headers={"Content-Type": "application/pdf"})
        )
        data = await _client(transport).attachments.download("fil_1")

        assert data == b"%PDF-1.7"
        assert transport.last_request.url.path == "/download/fil_1"
