"""User, department and location models."""

import enum
from uuid import UUID

from apiclient_shared import ApiModel, PhoneNumber

from apiclient_ramp.models.common import RampPage


class Role(str, enum.Enum):
    BUSINESS_ADMIN = "BUSINESS_ADMIN"
    BUSINESS_BOOKKEEPER = "BUSINESS_BOOKKEEPER"
    BUSINESS_OWNER = "BUSINESS_OWNER"
    BUSINESS_USER = "BUSINESS_USER"
    GUEST_USER = "GUEST_USER"
    IT_ADMIN = "IT_ADMIN"


class UserStatus(str, enum.Enum):
    INVITE_DELETED = "INVITE_DELETED"
    INVITE_EXPIRED = "INVITE_EXPIRED"
    INVITE_PENDING = "INVITE_PENDING"
    USER_ACTIVE = "USER_ACTIVE"
    USER_INACTIVE = "USER_INACTIVE"
    USER_ONBOARDING = "USER_ONBOARDING"
    USER_SUSPENDED = "USER_SUSPENDED"


class User(ApiModel):
    id: UUID | None = None
    business_id: UUID | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    role: Role | None = None
    status: UserStatus | None = None
    department_id: UUID | None = None
    location_id: UUID | None = None
    manager_id: UUID | None = None
    is_manager: bool | None = None


class UserCreate(ApiModel):
    """Invite a user. The invitation completes asynchronously (a deferred task).

    `phone` accepts loosely formatted numbers and is sent in international
    format; numbers without a country code are taken as North American.
    """

    email: str
    first_name: str
    last_name: str
    role: Role
    idempotency_key: str | None = None
    department_id: UUID | None = None
    location_id: UUID | None = None
    direct_manager_id: UUID | None = None
    phone: PhoneNumber | None = None


class UserUpdate(ApiModel):
    first_name: str | None = None
    last_name: str | None = None
    role: Role | None = None
    department_id: UUID | None = None
    location_id: UUID | None = None
    direct_manager_id: UUID | None = None
    is_manager: bool | None = None


class UserDeferredTaskData(ApiModel):
    user_id: UUID | None = None
    error: str | None = None


class UserDeferredTask(ApiModel):
    id: UUID | None = None
    status: str | None = None
    data: UserDeferredTaskData | None = None


class Department(ApiModel):
    id: UUID
    name: str


class DepartmentCreate(ApiModel):
    name: str


class DepartmentUpdate(ApiModel):
    name: str


class Location(ApiModel):
    id: UUID
    name: str


class LocationCreate(ApiModel):
    name: str
    business_id: int | None = None


class LocationUpdate(ApiModel):
    name: str


class UsersPage(RampPage):
    data: list[User] = []


class DepartmentsPage(RampPage):
    data: list[Department] = []


class LocationsPage(RampPage):
    data: list[Location] = []
