"""Business profile and balance models."""

from datetime import datetime
from uuid import UUID

from apiclient_shared import ApiModel

from apiclient_ramp.models.common import Address


class Business(ApiModel):
    id: UUID | None = None
    business_name_legal: str | None = None
    business_name_on_card: str | None = None
    website: str | None = None
    phone: str | None = None
    active: bool | None = None
    created_time: datetime | None = None
    enforce_sso: bool | None = None
    initial_approved_limit: int | None = None
    is_integrated_with_slack: bool | None = None
    is_reimbursements_enabled: bool | None = None
    limit_locked: bool | None = None
    billing_address: Address | None = None


class BusinessBalance(ApiModel):
    """Balances and limits in dollars."""

    balance_including_pending: float | None = None
    card_balance_excluding_pending: float | None = None
    card_balance_including_pending: float | None = None
    float_balance_excluding_pending: float | None = None
    statement_balance: float | None = None
    available_card_limit: float | None = None
    available_flex_limit: float | None = None
    card_limit: float | None = None
    flex_balance: float | None = None
    flex_limit: float | None = None
    global_limit: float | None = None
    max_balance: float | None = None
    next_billing_date: str | None = None
    prev_billing_date: str | None = None
