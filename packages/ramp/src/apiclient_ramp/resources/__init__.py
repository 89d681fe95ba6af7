"""Ramp resource accessors."""

from apiclient_ramp.resources.accounting import Bills, Cashbacks, Statements
from apiclient_ramp.resources.base import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from apiclient_ramp.resources.business import BusinessInfo
from apiclient_ramp.resources.cards import Cards
from apiclient_ramp.resources.people import Departments, Locations, Users
from apiclient_ramp.resources.spend import (
    Memos,
    Merchants,
    Receipts,
    Reimbursements,
    Transactions,
)
from apiclient_ramp.resources.tokens import Tokens

__all__ = [
    "MAX_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "Bills",
    "BusinessInfo",
    "Cards",
    "Cashbacks",
    "Departments",
    "Locations",
    "Memos",
    "Merchants",
    "Receipts",
    "Reimbursements",
    "Statements",
    "Tokens",
    "Transactions",
    "Users",
]
