"""Pagination envelope and small value types shared by Ramp resources.

Every Ramp list endpoint returns `{"data": [...], "page": {"next": ...}}`.
`page.next` is the full URL of the next page, carrying the cursor in its
`start` query parameter; null on the last page.
"""

from typing import Any
from uuid import UUID

from apiclient_shared import ApiModel, CursorPage
from apiclient_shared.pagination import cursor_from_url


class NestedPage(ApiModel):
    next: str | None = None


class RampPage(ApiModel, CursorPage):
    page: NestedPage = NestedPage()

    def items(self) -> list[Any]:
        return list(getattr(self, "data", []))

    def next_cursor(self) -> str | None:
        return cursor_from_url(self.page.next, "start")


class CurrencyAmount(ApiModel):
    """An amount in the currency's smallest unit (cents for USD)."""

    amount: int
    currency_code: str | None = None


class DeferredTaskUUID(ApiModel):
    """Handle of an asynchronous task; poll its status with the matching accessor."""

    id: UUID


class Address(ApiModel):
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
