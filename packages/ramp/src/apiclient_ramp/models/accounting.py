"""Statements, bills and cashback payments."""

from datetime import datetime
from typing import Any
from uuid import UUID

from apiclient_shared import ApiModel

from apiclient_ramp.models.common import CurrencyAmount, RampPage


class StatementLine(ApiModel):
    id: UUID | None = None
    type: str | None = None
    amount: CurrencyAmount | None = None


class Statement(ApiModel):
    id: UUID | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    opening_balance: CurrencyAmount | None = None
    closing_balance: CurrencyAmount | None = None
    charges: CurrencyAmount | None = None
    credits: CurrencyAmount | None = None
    payments: CurrencyAmount | None = None
    statement_url: str | None = None
    lines: list[StatementLine] | None = None


class Bill(ApiModel):
    id: UUID | None = None
    amount: CurrencyAmount | None = None
    invoice_number: str | None = None
    memo: str | None = None
    status: str | None = None
    entity_id: UUID | None = None
    issued_at: datetime | None = None
    due_at: datetime | None = None
    paid_at: datetime | None = None
    vendor: dict[str, Any] | None = None
    payment: dict[str, Any] | None = None
    line_items: list[dict[str, Any]] | None = None


class Cashback(ApiModel):
    id: UUID | None = None
    amount: CurrencyAmount | None = None
    created_at: datetime | None = None
    entity_id: UUID | None = None
    statement_id: UUID | None = None


class StatementsPage(RampPage):
    data: list[Statement] = []


class BillsPage(RampPage):
    data: list[Bill] = []


class CashbacksPage(RampPage):
    data: list[Cashback] = []
