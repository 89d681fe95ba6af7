"""Ramp cards.

Creating, suspending, unsuspending and terminating a card are deferred: the
call returns a task id at once and the outcome is read later with
`get_deferred_task`. Each deferred call carries an idempotency key.
"""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_ramp.models import (
    Card,
    CardDeferredTask,
    CardDeferredUpdate,
    CardRequest,
    CardsPage,
    CardUpdate,
    DeferredTaskUUID,
)
from apiclient_ramp.resources.base import page_params

CARD = "developer/v1/cards/{card_id}"


class Cards(Resource):
    async def list(
        self,
        card_program_id: str | None = None,
        is_activated: bool | None = None,
        user_id: str | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> CardsPage:
        return await self.client.request(
            "GET",
            "developer/v1/cards/",
            CardsPage,
            params=page_params(
                page_size,
                start,
                card_program_id=card_program_id,
                is_activated=is_activated,
                user_id=user_id,
            ),
        )

    async def get(self, card_id: str) -> Card:
        return await self.client.request("GET", CARD, Card, path_params={"card_id": card_id})

    async def update(self, card_id: str, body: CardUpdate) -> None:
        """Change display name, card program or spending restrictions."""
        await self.client.request("PATCH", CARD, path_params={"card_id": card_id}, body=body)

    async def suspend(self, card_id: str, body: CardDeferredUpdate) -> DeferredTaskUUID:
        """Lock a card; it can be unsuspended later."""
        return await self._deferred(card_id, "suspension", body)

    async def unsuspend(self, card_id: str, body: CardDeferredUpdate) -> DeferredTaskUUID:
        return await self._deferred(card_id, "unsuspension", body)

    async def terminate(self, card_id: str, body: CardDeferredUpdate) -> DeferredTaskUUID:
        """Permanently terminate a card. This cannot be undone."""
        return await self._deferred(card_id, "termination", body)

    async def create_physical(self, body: CardRequest) -> DeferredTaskUUID:
        return await self.client.request(
            "POST", "developer/v1/cards/deferred/physical", DeferredTaskUUID, body=body
        )

    async def create_virtual(self, body: CardRequest) -> DeferredTaskUUID:
        return await self.client.request(
            "POST", "developer/v1/cards/deferred/virtual", DeferredTaskUUID, body=body
        )

    async def get_deferred_task(self, task_uuid: str) -> CardDeferredTask:
        return await self.client.request(
            "GET",
            "developer/v1/cards/deferred/status/{task_uuid}",
            CardDeferredTask,
            path_params={"task_uuid": task_uuid},
        )

    async def _deferred(
        self, card_id: str, action: str, body: CardDeferredUpdate
    ) -> DeferredTaskUUID:
        return await self.client.request(
            "POST",
            f"{CARD}/deferred/{action}",
            DeferredTaskUUID,
            path_params={"card_id": card_id},
            body=body,
        )
