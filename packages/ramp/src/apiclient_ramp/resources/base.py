"""Shared paging arguments for Ramp list endpoints."""

from __future__ import annotations

from typing import Any

from apiclient_shared import InvalidRequestError

MIN_PAGE_SIZE = 2
MAX_PAGE_SIZE = 10_000


def page_params(page_size: int | None, start: str | None, **filters: Any) -> dict[str, Any]:
    """Query parameters for a list call; rejects an out-of-range page size.

    Raises:
        InvalidRequestError: page_size is outside 2..10000.
    """
    if page_size is not None and not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        raise InvalidRequestError(
            f"page_size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}, got {page_size}"
        )
    return {**filters, "page_size": page_size, "start": start}