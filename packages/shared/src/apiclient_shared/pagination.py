"""Cursor pagination helpers.

List endpoints return one page plus a cursor. The clients never loop over
pages themselves: a caller reads `next_cursor()` from the page it got and
passes it back to the same list method (`page_token=` for Front, `after=`
for HubSpot, `start=` for Ramp).

Usage:
    page = await client.contacts.list(limit=50)
    while page.has_more_pages():
        page = await client.contacts.list(limit=50, page_token=page.next_cursor())
"""

from __future__ import annotations

from typing import Any

import httpx


def cursor_from_url(url: str | None, param: str) -> str | None:
    """Extract a cursor from a next-page link, or pass a bare cursor through.

    Some APIs return the next page as a full URL with the cursor in its query
    string; others return the cursor itself.
    """
    if not url:
        return None
    if url.startswith(("http://", "https://", "/")):
        return httpx.URL(url).params.get(param)
    return url


class CursorPage:
    """Mixin for paginated response models."""

    def items(self) -> list[Any]:
        raise NotImplementedError

    def next_cursor(self) -> str | None:
        raise NotImplementedError

    def has_more_pages(self) -> bool:
        return self.next_cursor() is not None
