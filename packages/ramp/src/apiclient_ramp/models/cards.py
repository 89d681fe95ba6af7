"""Card models, including the deferred card tasks."""

import enum
from datetime import datetime
from uuid import UUID

from apiclient_shared import ApiModel

from apiclient_ramp.models.common import Address, RampPage


class CardState(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    TERMINATED = "TERMINATED"
    UNACTIVATED = "UNACTIVATED"


class Interval(str, enum.Enum):
    """Period over which a spending limit resets."""

    ANNUAL = "ANNUAL"
    DAILY = "DAILY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    TERTIARY = "TERTIARY"
    TOTAL = "TOTAL"
    WEEKLY = "WEEKLY"
    YEARLY = "YEARLY"


class SpendingRestrictions(ApiModel):
    """Limits on a card. `amount` is in dollars per `interval`."""

    amount: float
    interval: Interval
    transaction_amount_limit: float | None = None
    lock_date: datetime | None = None
    categories: list[int] | None = None
    categories_whitelist: list[int] | None = None
    categories_blacklist: list[int] | None = None
    vendor_whitelist: list[UUID] | None = None
    vendor_blacklist: list[UUID] | None = None
    blocked_mcc_codes: list[str] | None = None
    policy_id: str | None = None


class SpendingRestrictionsUpdate(ApiModel):
    amount: float | None = None
    interval: Interval | None = None
    transaction_amount_limit: float | None = None
    lock_date: datetime | None = None
    categories: list[int] | None = None
    categories_whitelist: list[int] | None = None
    categories_blacklist: list[int] | None = None
    vendor_whitelist: list[UUID] | None = None
    vendor_blacklist: list[UUID] | None = None
    blocked_mcc_codes: list[str] | None = None


class CardFulfillment(ApiModel):
    shipping: Address | None = None
    card_personalization: dict | None = None
    fulfillment_status: str | None = None


class Card(ApiModel):
    last_four: str
    id: UUID | None = None
    display_name: str | None = None
    state: CardState | None = None
    cardholder_id: UUID | None = None
    cardholder_name: str | None = None
    card_program_id: UUID | None = None
    has_program_overridden: bool | None = None
    is_physical: bool | None = None
    spending_restrictions: SpendingRestrictions | None = None
    fulfillment: CardFulfillment | None = None


class CardUpdate(ApiModel):
    display_name: str | None = None
    card_program_id: UUID | None = None
    has_notifications_enabled: bool | None = None
    spending_restrictions: SpendingRestrictionsUpdate | None = None


class CardDeferredUpdate(ApiModel):
    """Body of suspend/unsuspend/terminate; the key makes retries safe."""

    idempotency_key: str


class CardRequest(ApiModel):
    user_id: UUID
    idempotency_key: str
    display_name: str | None = None
    card_program_id: UUID | None = None
    is_physical: bool | None = None
    is_temporary: bool | None = None
    spending_restrictions: SpendingRestrictions | None = None
    fulfillment: CardFulfillment | None = None


class CardDeferredTaskData(ApiModel):
    card_id: UUID | None = None
    error: str | None = None


class CardDeferredTask(ApiModel):
    id: UUID | None = None
    status: str | None = None
    data: CardDeferredTaskData | None = None


class CardsPage(RampPage):
    data: list[Card] = []
