"""Typed Pydantic models for Ramp API requests and responses."""

from apiclient_ramp.models.accounting import (
    Bill,
    BillsPage,
    Cashback,
    CashbacksPage,
    Statement,
    StatementLine,
    StatementsPage,
)
from apiclient_ramp.models.business import Business, BusinessBalance
from apiclient_ramp.models.cards import (
    Card,
    CardDeferredTask,
    CardDeferredTaskData,
    CardDeferredUpdate,
    CardFulfillment,
    CardRequest,
    CardsPage,
    CardState,
    CardUpdate,
    Interval,
    SpendingRestrictions,
    SpendingRestrictionsUpdate,
)
from apiclient_ramp.models.common import (
    Address,
    CurrencyAmount,
    DeferredTaskUUID,
    NestedPage,
    RampPage,
)
from apiclient_ramp.models.people import (
    Department,
    DepartmentCreate,
    DepartmentsPage,
    DepartmentUpdate,
    Location,
    LocationCreate,
    LocationsPage,
    LocationUpdate,
    Role,
    User,
    UserCreate,
    UserDeferredTask,
    UserDeferredTaskData,
    UsersPage,
    UserStatus,
    UserUpdate,
)
from apiclient_ramp.models.spend import (
    Memo,
    MemosPage,
    Merchant,
    MerchantsPage,
    Receipt,
    ReceiptsPage,
    Reimbursement,
    ReimbursementDirection,
    ReimbursementsPage,
    Transaction,
    TransactionCardHolder,
    TransactionsPage,
    TransactionState,
)
from apiclient_ramp.models.tokens import (
    GrantType,
    TokenRequestBody,
    TokenResponse,
    TokenRevokeRequestBody,
    TokenTypeHint,
)

__all__ = [
    "Address",
    "Bill",
    "BillsPage",
    "Business",
    "BusinessBalance",
    "Card",
    "CardDeferredTask",
    "CardDeferredTaskData",
    "CardDeferredUpdate",
    "CardFulfillment",
    "CardRequest",
    "CardState",
    "CardUpdate",
    "CardsPage",
    "Cashback",
    "CashbacksPage",
    "CurrencyAmount",
    "DeferredTaskUUID",
    "Department",
    "DepartmentCreate",
    "DepartmentUpdate",
    "DepartmentsPage",
    "GrantType",
    "Interval",
    "Location",
    "LocationCreate",
    "LocationUpdate",
    "LocationsPage",
    "Memo",
    "MemosPage",
    "Merchant",
    "MerchantsPage",
    "NestedPage",
    "RampPage",
    "Receipt",
    "ReceiptsPage",
    "Reimbursement",
    "ReimbursementDirection",
    "ReimbursementsPage",
    "Role",
    "SpendingRestrictions",
    "SpendingRestrictionsUpdate",
    "Statement",
    "StatementLine",
    "StatementsPage",
    "TokenRequestBody",
    "TokenResponse",
    "TokenRevokeRequestBody",
    "TokenTypeHint",
    "Transaction",
    "TransactionCardHolder",
    "TransactionState",
    "TransactionsPage",
    "User",
    "UserCreate",
    "UserDeferredTask",
    "UserDeferredTaskData",
    "UserStatus",
    "UserUpdate",
    "UsersPage",
]
