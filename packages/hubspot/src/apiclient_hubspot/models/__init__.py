"""Typed Pydantic models for HubSpot API requests and responses."""

from apiclient_hubspot.models.common import (
    ErrorDetail,
    ForwardPage,
    HubSpotModel,
    NextPage,
    Paging,
    PreviousPage,
    StandardError,
)
from apiclient_hubspot.models.crm import (
    AssociatedId,
    AssociationCategory,
    AssociationSpec,
    BatchInputSimplePublicObjectBatchInput,
    BatchInputSimplePublicObjectId,
    BatchInputSimplePublicObjectInputForCreate,
    BatchReadInputSimplePublicObjectId,
    BatchResponseSimplePublicObject,
    BatchStatus,
    CollectionResponseAssociatedId,
    CollectionResponseSimplePublicObjectWithAssociationsForwardPaging,
    CollectionResponseWithTotalSimplePublicObjectForwardPaging,
    Filter,
    FilterGroup,
    Operator,
    PublicAssociationsForObject,
    PublicGdprDeleteInput,
    PublicMergeInput,
    PublicObjectId,
    PublicObjectSearchRequest,
    SimplePublicObject,
    SimplePublicObjectBatchInput,
    SimplePublicObjectId,
    SimplePublicObjectInput,
    SimplePublicObjectInputForCreate,
    SimplePublicObjectWithAssociations,
    ValueWithTimestamp,
)
from apiclient_hubspot.models.users import (
    CollectionResponsePublicPermissionSetNoPaging,
    CollectionResponsePublicTeamNoPaging,
    CollectionResponsePublicUserForwardPaging,
    IdProperty,
    PublicPermissionSet,
    PublicTeam,
    PublicUser,
    PublicUserUpdate,
    UserProvisionRequest,
)

__all__ = [
    "AssociatedId",
    "AssociationCategory",
    "AssociationSpec",
    "BatchInputSimplePublicObjectBatchInput",
    "BatchInputSimplePublicObjectId",
    "BatchInputSimplePublicObjectInputForCreate",
    "BatchReadInputSimplePublicObjectId",
    "BatchResponseSimplePublicObject",
    "BatchStatus",
    "CollectionResponseAssociatedId",
    "CollectionResponsePublicPermissionSetNoPaging",
    "CollectionResponsePublicTeamNoPaging",
    "CollectionResponsePublicUserForwardPaging",
    "CollectionResponseSimplePublicObjectWithAssociationsForwardPaging",
    "CollectionResponseWithTotalSimplePublicObjectForwardPaging",
    "ErrorDetail",
    "Filter",
    "FilterGroup",
    "ForwardPage",
    "HubSpotModel",
    "IdProperty",
    "NextPage",
    "Operator",
    "Paging",
    "PreviousPage",
    "PublicAssociationsForObject",
    "PublicGdprDeleteInput",
    "PublicMergeInput",
    "PublicObjectId",
    "PublicObjectSearchRequest",
    "PublicPermissionSet",
    "PublicTeam",
    "PublicUser",
    "PublicUserUpdate",
    "SimplePublicObject",
    "SimplePublicObjectBatchInput",
    "SimplePublicObjectId",
    "SimplePublicObjectInput",
    "SimplePublicObjectInputForCreate",
    "SimplePublicObjectWithAssociations",
    "StandardError",
    "UserProvisionRequest",
    "ValueWithTimestamp",
]
