"""HubSpot CRM objects: the `crm/v3/objects/{object_type}` API.

Contacts, tickets, companies and deals all share one endpoint layout, so one
accessor class serves every object type; the client binds it to a type name.

Pagination: `after` cursor from `paging.next.after`.
Batch limits: at most 100 inputs per batch call.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from apiclient_shared import BaseClient, InvalidRequestError, Resource

from apiclient_hubspot.models import (
    BatchInputSimplePublicObjectBatchInput,
    BatchInputSimplePublicObjectId,
    BatchInputSimplePublicObjectInputForCreate,
    BatchReadInputSimplePublicObjectId,
    BatchResponseSimplePublicObject,
    CollectionResponseSimplePublicObjectWithAssociationsForwardPaging,
    CollectionResponseWithTotalSimplePublicObjectForwardPaging,
    PublicGdprDeleteInput,
    PublicMergeInput,
    PublicObjectSearchRequest,
    SimplePublicObject,
    SimplePublicObjectInput,
    SimplePublicObjectInputForCreate,
    SimplePublicObjectWithAssociations,
)

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 100


def _check_batch(inputs: Sequence[Any]) -> None:
    if len(inputs) > MAX_BATCH_SIZE:
        raise InvalidRequestError(
            f"batch of {len(inputs)} inputs exceeds the limit of {MAX_BATCH_SIZE}"
        )


class CrmObjects(Resource):
    """Accessor for one CRM object type (e.g. "contacts", "tickets")."""

    def __init__(self, client: BaseClient, object_type: str) -> None:
        super().__init__(client)
        self.object_type = object_type
        self.base_path = f"crm/v3/objects/{object_type}"

    async def get_by_id(
        self,
        object_id: str,
        properties: list[str] | None = None,
        properties_with_history: list[str] | None = None,
        associations: list[str] | None = None,
        archived: bool | None = None,
        id_property: str | None = None,
    ) -> SimplePublicObjectWithAssociations:
        """Read one object.

        Args:
            object_id: The object id, or the value of `id_property` when set.
            properties: Properties to return; unknown names are ignored.
            properties_with_history: Properties to return with their change history.
            associations: Object types whose associated ids should be returned.
            archived: Whether to read an archived object.
            id_property: A unique property to look the object up by, e.g. "email".
        """
        return await self.client.request(
            "GET",
            f"{self.base_path}/{{object_id}}",
            SimplePublicObjectWithAssociations,
            path_params={"object_id": object_id},
            params={
                "archived": archived,
                "associations": associations,
                "idProperty": id_property,
                "properties": properties,
                "propertiesWithHistory": properties_with_history,
            },
        )

    async def archive(self, object_id: str) -> None:
        """Move an object to the recycling bin."""
        await self.client.request(
            "DELETE", f"{self.base_path}/{{object_id}}", path_params={"object_id": object_id}
        )

    async def update(
        self,
        object_id: str,
        body: SimplePublicObjectInput,
        id_property: str | None = None,
    ) -> SimplePublicObject:
        """Update properties; a blank string clears a property."""
        return await self.client.request(
            "PATCH",
            f"{self.base_path}/{{object_id}}",
            SimplePublicObject,
            path_params={"object_id": object_id},
            params={"idProperty": id_property},
            body=body,
        )

    async def get_page(
        self,
        limit: int | None = None,
        after: str | None = None,
        properties: list[str] | None = None,
        properties_with_history: list[str] | None = None,
        associations: list[str] | None = None,
        archived: bool | None = None,
    ) -> CollectionResponseSimplePublicObjectWithAssociationsForwardPaging:
        """Read one page of objects."""
        return await self.client.request(
            "GET",
            self.base_path,
            CollectionResponseSimplePublicObjectWithAssociationsForwardPaging,
            params={
                "after": after,
                "archived": archived,
                "associations": associations,
                "limit": limit,
                "properties": properties,
                "propertiesWithHistory": properties_with_history,
            },
        )

    async def create(self, body: SimplePublicObjectInputForCreate) -> SimplePublicObject:
        return await self.client.request("POST", self.base_path, SimplePublicObject, body=body)

    async def merge(self, body: PublicMergeInput) -> SimplePublicObject:
        """Merge `object_id_to_merge` into `primary_object_id`."""
        return await self.client.request(
            "POST", f"{self.base_path}/merge", SimplePublicObject, body=body
        )

    async def batch_read(
        self, body: BatchReadInputSimplePublicObjectId, archived: bool | None = None
    ) -> BatchResponseSimplePublicObject:
        _check_batch(body.inputs)
        return await self.client.request(
            "POST",
            f"{self.base_path}/batch/read",
            BatchResponseSimplePublicObject,
            params={"archived": archived},
            body=body,
        )

    async def batch_archive(self, body: BatchInputSimplePublicObjectId) -> None:
        _check_batch(body.inputs)
        await self.client.request("POST", f"{self.base_path}/batch/archive", body=body)

    async def batch_create(
        self, body: BatchInputSimplePublicObjectInputForCreate
    ) -> BatchResponseSimplePublicObject:
        _check_batch(body.inputs)
        return await self.client.request(
            "POST", f"{self.base_path}/batch/create", BatchResponseSimplePublicObject, body=body
        )

    async def batch_update(
        self, body: BatchInputSimplePublicObjectBatchInput
    ) -> BatchResponseSimplePublicObject:
        _check_batch(body.inputs)
        response = await self.client.request(
            "POST", f"{self.base_path}/batch/update", BatchResponseSimplePublicObject, body=body
        )
        if response.num_errors:
            logger.warning(
                f"Batch update of {self.object_type}: {response.num_errors} of "
                f"{len(body.inputs)} inputs failed"
            )
        return response

    async def search(
        self, body: PublicObjectSearchRequest
    ) -> CollectionResponseWithTotalSimplePublicObjectForwardPaging:
        """Filter, sort and search objects.

        Usage:
            request = PublicObjectSearchRequest(
                filter_groups=[FilterGroup(filters=[
                    Filter(property_name="email", operator=Operator.EQ, value="ada@example.com"),
                ])],
                properties=["email", "firstname"],
            )
            result = await client.contacts.search(request)
        """
        return await self.client.request(
            "POST",
            f"{self.base_path}/search",
            CollectionResponseWithTotalSimplePublicObjectForwardPaging,
            body=body,
        )


class ContactObjects(CrmObjects):
    """Contacts add GDPR-compliant permanent deletion."""

    def __init__(self, client: BaseClient) -> None:
        super().__init__(client, "contacts")

    async def gdpr_purge(self, body: PublicGdprDeleteInput) -> None:
        """Permanently delete a contact and all its content."""
        await self.client.request("POST", f"{self.base_path}/gdpr-delete", body=body)
