"""Spend data: transactions, reimbursements, receipts, memos and merchants.

Transaction and reimbursement `amount` is in dollars; the `original_*_amount`
fields carry the pre-conversion amount in the currency's smallest unit.
"""

import enum
from datetime import date, datetime
from typing import Any
from uuid import UUID

from apiclient_shared import ApiModel

from apiclient_ramp.models.common import CurrencyAmount, RampPage


class TransactionState(str, enum.Enum):
    ALL = "ALL"
    CLEARED = "CLEARED"
    COMPLETION = "COMPLETION"
    DECLINED = "DECLINED"
    ERROR = "ERROR"
    PENDING = "PENDING"
    PENDING_INITIATION = "PENDING_INITIATION"


class TransactionCardHolder(ApiModel):
    user_id: UUID | None = None
    first_name: str | None = None
    last_name: str | None = None
    department_id: UUID | None = None
    department_name: str | None = None
    location_id: UUID | None = None
    location_name: str | None = None


class Transaction(ApiModel):
    id: UUID | None = None
    amount: float | None = None
    currency_code: str | None = None
    original_transaction_amount: CurrencyAmount | None = None
    state: TransactionState | None = None
    user_transaction_time: datetime | None = None
    card_id: str | None = None
    card_holder: TransactionCardHolder | None = None
    merchant_id: UUID | None = None
    merchant_name: str | None = None
    merchant_descriptor: str | None = None
    merchant_category_code: str | None = None
    merchant_category_code_description: str | None = None
    sk_category_id: int | None = None
    sk_category_name: str | None = None
    memo: str | None = None
    receipts: list[UUID] | None = None
    line_items: list[dict[str, Any]] | None = None
    disputes: list[dict[str, Any]] | None = None
    policy_violations: list[dict[str, Any]] | None = None
    accounting_categories: list[dict[str, Any]] | None = None
    accounting_field_selections: list[dict[str, Any]] | None = None
    decline_details: dict[str, Any] | None = None


class ReimbursementDirection(str, enum.Enum):
    BUSINESS_TO_USER = "BUSINESS_TO_USER"
    USER_TO_BUSINESS = "USER_TO_BUSINESS"


class Reimbursement(ApiModel):
    id: UUID | None = None
    user_id: UUID | None = None
    amount: float | None = None
    currency: str | None = None
    original_reimbursement_amount: CurrencyAmount | None = None
    direction: ReimbursementDirection | None = None
    merchant: str | None = None
    transaction_date: date | None = None
    created_at: datetime | None = None
    receipts: list[UUID] | None = None
    line_items: list[dict[str, Any]] | None = None
    accounting_field_selections: list[dict[str, Any]] | None = None


class Receipt(ApiModel):
    id: UUID | None = None
    user_id: UUID | None = None
    transaction_id: UUID | None = None
    receipt_url: str | None = None
    created_at: datetime | None = None


class Memo(ApiModel):
    """A transaction memo; `id` is the transaction id."""

    id: UUID | None = None
    memo: str | None = None


class Merchant(ApiModel):
    id: UUID | None = None
    merchant_name: str | None = None
    sk_category_name: str | None = None


class TransactionsPage(RampPage):
    data: list[Transaction] = []


class ReimbursementsPage(RampPage):
    data: list[Reimbursement] = []


class ReceiptsPage(RampPage):
    data: list[Receipt] = []


class MemosPage(RampPage):
    data: list[Memo] = []


class MerchantsPage(RampPage):
    data: list[Merchant] = []
