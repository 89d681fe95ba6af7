"""Ramp statements, bills and cashback payments."""

from __future__ import annotations

from datetime import datetime

from apiclient_shared import Resource

from apiclient_ramp.models import (
    Bill,
    BillsPage,
    Cashback,
    CashbacksPage,
    Statement,
    StatementsPage,
)
from apiclient_ramp.resources.base import page_params


class Statements(Resource):
    async def list(
        self,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> StatementsPage:
        """List statements, optionally bounded by statement date."""
        return await self.client.request(
            "GET",
            "developer/v1/statements",
            StatementsPage,
            params=page_params(page_size, start, from_date=from_date, to_date=to_date),
        )

    async def get(self, statement_id: str) -> Statement:
        return await self.client.request(
            "GET",
            "developer/v1/statements/{statement_id}",
            Statement,
            path_params={"statement_id": statement_id},
        )


class Bills(Resource):
    async def list(
        self,
        entity_id: str | None = None,
        payment_status: str | None = None,
        payment_method: str | None = None,
        from_issued_date: datetime | None = None,
        to_issued_date: datetime | None = None,
        from_due_date: datetime | None = None,
        to_due_date: datetime | None = None,
        sync_ready: bool | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> BillsPage:
        return await self.client.request(
            "GET",
            "developer/v1/bills",
            BillsPage,
            params=page_params(
                page_size,
                start,
                entity_id=entity_id,
                payment_status=payment_status,
                payment_method=payment_method,
                from_issued_date=from_issued_date,
                to_issued_date=to_issued_date,
                from_due_date=from_due_date,
                to_due_date=to_due_date,
                sync_ready=sync_ready,
            ),
        )

    async def get(self, bill_id: str) -> Bill:
        return await self.client.request(
            "GET", "developer/v1/bills/{bill_id}", Bill, path_params={"bill_id": bill_id}
        )


class Cashbacks(Resource):
    async def list(
        self,
        entity_id: str | None = None,
        statement_id: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        sync_ready: bool | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> CashbacksPage:
        return await self.client.request(
            "GET",
            "developer/v1/cashbacks",
            CashbacksPage,
            params=page_params(
                page_size,
                start,
                entity_id=entity_id,
                statement_id=statement_id,
                from_date=from_date,
                to_date=to_date,
                sync_ready=sync_ready,
            ),
        )

    async def get(self, cashback_id: str) -> Cashback:
        return await self.client.request(
            "GET",
            "developer/v1/cashbacks/{cashback_id}",
            Cashback,
            path_params={"cashback_id": cashback_id},
        )
