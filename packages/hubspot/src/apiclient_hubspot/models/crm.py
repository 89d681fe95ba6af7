"""CRM object models (contacts, tickets and every other `crm/v3/objects` type).

Property values are always strings on the wire, including numbers and dates,
and a property the object has never had comes back as null.
"""

import enum
from datetime import datetime

from apiclient_hubspot.models.common import ForwardPage, HubSpotModel, StandardError


class ValueWithTimestamp(HubSpotModel):
    value: str
    timestamp: datetime
    source_type: str
    source_id: str | None = None
    source_label: str | None = None
    updated_by_user_id: int | None = None


class SimplePublicObject(HubSpotModel):
    id: str
    properties: dict[str, str | None] = {}
    properties_with_history: dict[str, list[ValueWithTimestamp]] | None = None
    created_at: datetime
    updated_at: datetime
    archived: bool | None = None
    archived_at: datetime | None = None


class AssociatedId(HubSpotModel):
    id: str
    type: str


class CollectionResponseAssociatedId(ForwardPage):
    results: list[AssociatedId] = []


class SimplePublicObjectWithAssociations(SimplePublicObject):
    associations: dict[str, CollectionResponseAssociatedId] | None = None


class SimplePublicObjectId(HubSpotModel):
    id: str


class SimplePublicObjectInput(HubSpotModel):
    properties: dict[str, str]


class AssociationCategory(str, enum.Enum):
    HUBSPOT_DEFINED = "HUBSPOT_DEFINED"
    USER_DEFINED = "USER_DEFINED"
    INTEGRATOR_DEFINED = "INTEGRATOR_DEFINED"


class AssociationSpec(HubSpotModel):
    association_category: AssociationCategory
    association_type_id: int


class PublicObjectId(HubSpotModel):
    id: str


class PublicAssociationsForObject(HubSpotModel):
    to: PublicObjectId
    types: list[AssociationSpec]


class SimplePublicObjectInputForCreate(HubSpotModel):
    properties: dict[str, str]
    associations: list[PublicAssociationsForObject] = []


class SimplePublicObjectBatchInput(HubSpotModel):
    id: str
    properties: dict[str, str]
    id_property: str | None = None


class PublicMergeInput(HubSpotModel):
    primary_object_id: str
    object_id_to_merge: str


class PublicGdprDeleteInput(HubSpotModel):
    """Permanently delete a contact; `id_property="email"` purges by email."""

    object_id: str
    id_property: str | None = None


class BatchReadInputSimplePublicObjectId(HubSpotModel):
    inputs: list[SimplePublicObjectId]
    properties: list[str] = []
    properties_with_history: list[str] = []
    id_property: str | None = None


class BatchInputSimplePublicObjectId(HubSpotModel):
    inputs: list[SimplePublicObjectId]


class BatchInputSimplePublicObjectInputForCreate(HubSpotModel):
    inputs: list[SimplePublicObjectInputForCreate]


class BatchInputSimplePublicObjectBatchInput(HubSpotModel):
    inputs: list[SimplePublicObjectBatchInput]


class BatchStatus(str, enum.Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    CANCELED = "CANCELED"
    COMPLETE = "COMPLETE"


class BatchResponseSimplePublicObject(HubSpotModel):
    """Batch result; a partial failure (HTTP 207) also fills `errors`."""

    status: BatchStatus
    results: list[SimplePublicObject]
    started_at: datetime
    completed_at: datetime
    requested_at: datetime | None = None
    links: dict[str, str] | None = None
    num_errors: int | None = None
    errors: list[StandardError] | None = None


class CollectionResponseSimplePublicObjectWithAssociationsForwardPaging(ForwardPage):
    results: list[SimplePublicObjectWithAssociations] = []


class CollectionResponseWithTotalSimplePublicObjectForwardPaging(ForwardPage):
    total: int
    results: list[SimplePublicObject] = []


class Operator(str, enum.Enum):
    EQ = "EQ"
    NEQ = "NEQ"
    LT = "LT"
    LTE = "LTE"
    GT = "GT"
    GTE = "GTE"
    BETWEEN = "BETWEEN"
    IN = "IN"
    NOT_IN = "NOT_IN"
    HAS_PROPERTY = "HAS_PROPERTY"
    NOT_HAS_PROPERTY = "NOT_HAS_PROPERTY"
    CONTAINS_TOKEN = "CONTAINS_TOKEN"
    NOT_CONTAINS_TOKEN = "NOT_CONTAINS_TOKEN"


class Filter(HubSpotModel):
    """One search condition. BETWEEN uses `value` and `high_value`; IN uses `values`."""

    property_name: str
    operator: Operator
    value: str | None = None
    values: list[str] | None = None
    high_value: str | None = None


class FilterGroup(HubSpotModel):
    """Filters ANDed together; groups are ORed."""

    filters: list[Filter]


class PublicObjectSearchRequest(HubSpotModel):
    filter_groups: list[FilterGroup] = []
    sorts: list[str] = []
    properties: list[str] = []
    limit: int = 10
    after: str | None = None
    query: str | None = None
