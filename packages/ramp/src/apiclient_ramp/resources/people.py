"""Ramp users, departments and locations."""

from __future__ import annotations

from apiclient_shared import Resource

from apiclient_ramp.models import (
    DeferredTaskUUID,
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
    UsersPage,
    UserUpdate,
)
from apiclient_ramp.resources.base import page_params

USER = "developer/v1/users/{user_id}"


class Users(Resource):
    async def list(
        self,
        department_id: str | None = None,
        email: str | None = None,
        entity_id: str | None = None,
        location_id: str | None = None,
        role: Role | None = None,
        page_size: int | None = None,
        start: str | None = None,
    ) -> UsersPage:
        return await self.client.request(
            "GET",
            "developer/v1/users",
            UsersPage,
            params=page_params(
                page_size,
                start,
                department_id=department_id,
                email=email,
                entity_id=entity_id,
                location_id=location_id,
                role=role,
            ),
        )

    async def create_deferred(self, body: UserCreate) -> DeferredTaskUUID:
        """Invite a user; poll `get_deferred_task` for the new user's id."""
        return await self.client.request(
            "POST", "developer/v1/users/deferred", DeferredTaskUUID, body=body
        )

    async def get_deferred_task(self, task_id: str) -> UserDeferredTask:
        return await self.client.request(
            "GET",
            "developer/v1/users/deferred/status/{task_id}",
            UserDeferredTask,
            path_params={"task_id": task_id},
        )

    async def get(self, user_id: str) -> User:
        return await self.client.request("GET", USER, User, path_params={"user_id": user_id})

    async def update(self, user_id: str, body: UserUpdate) -> None:
        await self.client.request("PATCH", USER, path_params={"user_id": user_id}, body=body)

    async def delete(self, user_id: str) -> None:
        """Deactivate a user."""
        await self.client.request("DELETE", USER, path_params={"user_id": user_id})


class Departments(Resource):
    async def list(self, page_size: int | None = None, start: str | None = None) -> DepartmentsPage:
        return await self.client.request(
            "GET", "developer/v1/departments", DepartmentsPage, params=page_params(page_size, start)
        )

    async def create(self, body: DepartmentCreate) -> Department:
        return await self.client.request("POST", "developer/v1/departments", Department, body=body)

    async def get(self, department_id: str) -> Department:
        return await self.client.request(
            "GET",
            "developer/v1/departments/{department_id}",
            Department,
            path_params={"department_id": department_id},
        )

    async def update(self, department_id: str, body: DepartmentUpdate) -> Department:
        return await self.client.request(
            "PATCH",
            "developer/v1/departments/{department_id}",
            Department,
            path_params={"department_id": department_id},
            body=body,
        )


class Locations(Resource):
    async def list(self, page_size: int | None = None, start: str | None = None) -> LocationsPage:
        return await self.client.request(
            "GET", "developer/v1/locations/", LocationsPage, params=page_params(page_size, start)
        )

    async def create(self, body: LocationCreate) -> Location:
        return await self.client.request("POST", "developer/v1/locations/", Location, body=body)

    async def get(self, location_uuid: str) -> Location:
        return await self.client.request(
            "GET",
            "developer/v1/locations/{location_uuid}",
            Location,
            path_params={"location_uuid": location_uuid},
        )

    async def update(self, location_uuid: str, body: LocationUpdate) -> Location:
        return await self.client.request(
            "PATCH",
            "developer/v1/locations/{location_uuid}",
            Location,
            path_params={"location_uuid": location_uuid},
            body=body,
        )
