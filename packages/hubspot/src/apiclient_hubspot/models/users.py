"""Account user, role and team models (`settings/v3/users`)."""

import enum

from apiclient_hubspot.models.common import ForwardPage, HubSpotModel


class IdProperty(str, enum.Enum):
    """How a `user_id` path segment is interpreted."""

    USER_ID = "USER_ID"
    EMAIL = "EMAIL"


class PublicUser(HubSpotModel):
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role_id: str | None = None
    role_ids: list[str] | None = None
    primary_team_id: str | None = None
    secondary_team_ids: list[str] | None = None
    send_welcome_email: bool | None = None
    super_admin: bool | None = None


class UserProvisionRequest(HubSpotModel):
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role_id: str | None = None
    primary_team_id: str | None = None
    secondary_team_ids: list[str] | None = None
    send_welcome_email: bool | None = None


class PublicUserUpdate(HubSpotModel):
    first_name: str | None = None
    last_name: str | None = None
    role_id: str | None = None
    primary_team_id: str | None = None
    secondary_team_ids: list[str] | None = None


class PublicPermissionSet(HubSpotModel):
    id: str
    name: str
    requires_billing_write: bool


class PublicTeam(HubSpotModel):
    id: str
    name: str
    user_ids: list[str] = []
    secondary_user_ids: list[str] = []


class CollectionResponsePublicUserForwardPaging(ForwardPage):
    results: list[PublicUser] = []


class CollectionResponsePublicPermissionSetNoPaging(HubSpotModel):
    results: list[PublicPermissionSet] = []


class CollectionResponsePublicTeamNoPaging(HubSpotModel):
    results: list[PublicTeam] = []
