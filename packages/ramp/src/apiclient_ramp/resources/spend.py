"""Ramp spend data: transactions, reimbursements, receipts, memos, merchants."""

from __future__ import annotations

from datetime import datetime

from apiclient_shared import Resource

from apiclient_ramp.models import (
    Memo,
    MemosPage,
    MerchantsPage,
    Receipt,
    ReceiptsPage,
    Reimbursement,
    ReimbursementsPage,
    Transaction,
    TransactionsPage,
    TransactionState,
)
from apiclient_ramp.resources.base import page_params


class Transactions(Resource):
    async def list(
        self,
        card_id: str | None = None,
        department_id: str | None = None,
        location_id: str | None = None,
        merchant_id: str | None = None,
        user_id: str | None = None,
        manager_id: str | None = None,
        sk_category_id: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        min_amount: float | None = None,
        max_amount: float | None = None,
        state: TransactionState | None = None,
        order_by_date_asc: bool | None = None,
        order_by_date_desc: bool | None = None,
        order_by_amount_asc: bool | None = None,
        order_by_amount_desc: bool | None = None,
        requires_memo: bool | None = None,
        sync_ready: bool | None = None,
        has_no_sync_commits: bool | None = None,
        expense_policy_interaction_has_alert: bool | None = None,
        expense_policy_interaction_needs_review: bool | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> TransactionsPage:
        """List card transactions.

        Args:
            from_date: Transactions on or after this time.
            to_date: Transactions before this time.
            min_amount: Lower bound on the dollar amount.
            max_amount: Upper bound on the dollar amount.
            state: Only this state; the default excludes declined transactions,
                use TransactionState.ALL to include them.
            requires_memo: Only transactions still missing a required memo.
            sync_ready: Only transactions ready to sync to the accounting system.
            has_no_sync_commits: Only transactions never synced.
        """
        return await self.client.request(
            "GET",
            "developer/v1/transactions/",
            TransactionsPage,
            params=page_params(
                page_size,
                start,
                card_id=card_id,
                department_id=department_id,
                location_id=location_id,
                merchant_id=merchant_id,
                user_id=user_id,
                manager_id=manager_id,
                sk_category_id=sk_category_id,
                from_date=from_date,
                to_date=to_date,
                min_amount=min_amount,
                max_amount=max_amount,
                state=state,
                order_by_date_asc=order_by_date_asc,
                order_by_date_desc=order_by_date_desc,
                order_by_amount_asc=order_by_amount_asc,
                order_by_amount_desc=order_by_amount_desc,
                requires_memo=requires_memo,
                sync_ready=sync_ready,
                has_no_sync_commits=has_no_sync_commits,
                expense_policy_interaction_has_alert=expense_policy_interaction_has_alert,
                expense_policy_interaction_needs_review=expense_policy_interaction_needs_review,
            ),
        )

    async def get(self, transaction_id: str) -> Transaction:
        return await self.client.request(
            "GET",
            "developer/v1/transactions/{transaction_id}",
            Transaction,
            path_params={"transaction_id": transaction_id},
        )


class Reimbursements(Resource):
    async def list(
        self,
        user_id: str | None = None,
        sync_ready: bool | None = None,
        has_no_sync_commits: bool | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> ReimbursementsPage:
        return await self.client.request(
            "GET",
            "developer/v1/reimbursements/",
            ReimbursementsPage,
            params=page_params(
                page_size,
                start,
                user_id=user_id,
                sync_ready=sync_ready,
                has_no_sync_commits=has_no_sync_commits,
            ),
        )

    async def get(self, reimbursement_id: str) -> Reimbursement:
        return await self.client.request(
            "GET",
            "developer/v1/reimbursements/{reimbursement_id}",
            Reimbursement,
            path_params={"reimbursement_id": reimbursement_id},
        )


class Receipts(Resource):
    async def list(
        self,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        created_after: datetime | None = None,
        created_before: datetime | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> ReceiptsPage:
        return await self.client.request(
            "GET",
            "developer/v1/receipts/",
            ReceiptsPage,
            params=page_params(
                page_size,
                start,
                from_date=from_date,
                to_date=to_date,
                created_after=created_after,
                created_before=created_before,
            ),
        )

    async def get(self, receipt_id: str) -> Receipt:
        return await self.client.request(
            "GET",
            "developer/v1/receipts/{receipt_id}",
            Receipt,
            path_params={"receipt_id": receipt_id},
        )


class Memos(Resource):
    async def list(
        self,
        card_id: str | None = None,
        department_id: str | None = None,
        location_id: str | None = None,
        manager_id: str | None = None,
        merchant_id: str | None = None,
        user_id: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> MemosPage:
        return await self.client.request(
            "GET",
            "developer/v1/memos/",
            MemosPage,
            params=page_params(
                page_size,
                start,
                card_id=card_id,
                department_id=department_id,
                location_id=location_id,
                manager_id=manager_id,
                merchant_id=merchant_id,
                user_id=user_id,
                from_date=from_date,
                to_date=to_date,
            ),
        )

    async def get(self, transaction_id: str) -> Memo:
        """The memo of a transaction."""
        return await self.client.request(
            "GET",
            "developer/v1/memos/{transaction_id}",
            Memo,
            path_params={"transaction_id": transaction_id},
        )


class Merchants(Resource):
    async def list(
        self,
        transaction_from_date: datetime | None = None,
        transaction_to_date: datetime | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> MerchantsPage:
        """Merchants the business has transacted with in the date range."""
        return await self.client.request(
            "GET",
            "developer/v1/merchants/",
            MerchantsPage,
            params=page_params(
                page_size,
                start,
                transaction_from_date=transaction_from_date,
                transaction_to_date=transaction_to_date,
            ),
        )
