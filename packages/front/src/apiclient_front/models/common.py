"""Envelope models shared by Front responses.

Every Front resource carries `_links.self`, and every list response wraps its
items in `_results`. The `_links` envelope is exposed as `api_links` because
some resources also carry a plain `links` field of their own.

Paginated lists add `_pagination.next`, the full URL of the next page with the
cursor in its `page_token` query parameter.
"""

from typing import Any

from apiclient_shared import ApiModel, CursorPage
from apiclient_shared.pagination import cursor_from_url
from pydantic import Field


class Links(ApiModel):
    self_: str | None = Field(default=None, alias="self")
    related: dict[str, Any] | None = None


class Pagination(ApiModel):
    next: str | None = None


class FrontList(ApiModel):
    """A non-paginated `_results` list."""

    api_links: Links | None = Field(default=None, alias="_links")


class FrontPage(FrontList, CursorPage):
    """A `_results` list with `_pagination`."""

    pagination: Pagination | None = Field(default=None, alias="_pagination")

    def items(self) -> list[Any]:
        return list(getattr(self, "results", []))

    def next_cursor(self) -> str | None:
        if self.pagination is None:
            return None
        return cursor_from_url(self.pagination.next, "page_token")
