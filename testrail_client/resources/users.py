from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.fields import Role
from ..models.users import Group, GroupFilters, User
from .base import DEFAULT_LIMIT, Resource, page_params, unwrap


class UsersResource(Resource):
    async def list(self, project_id: Optional[int] = None) -> list[User]:
        """
        Return users, optionally only those with access to a project.

        Since TestRail 6.6 only administrators may omit ``project_id``.
        """
        endpoint = "get_users" if project_id is None else f"get_users/{project_id}"
        data = await self._transport.get(endpoint)
        return parse_records(User, unwrap(data, "users"))

    async def get(self, user_id: int) -> User:
        data = await self._transport.get(f"get_user/{user_id}")
        return parse_record(User, data)

    async def get_by_email(self, email: str) -> User:
        data = await self._transport.get("get_user_by_email", params={"email": email})
        return parse_record(User, data)

    async def add(self, user: PayloadLike) -> User:
        data = await self._transport.post("add_user", dump_payload(user))
        return parse_record(User, data)

    async def update(self, user_id: int, user: PayloadLike) -> User:
        data = await self._transport.post(f"update_user/{user_id}", dump_payload(user))
        return parse_record(User, data)

    async def get_current(self) -> User:
        data = await self._transport.get("get_current_user")
        return parse_record(User, data)


class GroupsResource(Resource):
    async def list(self, filters: Optional[GroupFilters] = None) -> list[Group]:
        data = await self._transport.get("get_groups", params=dump_filters(filters))
        return parse_records(Group, unwrap(data, "groups"))

    async def get(self, group_id: int) -> Group:
        data = await self._transport.get(f"get_group/{group_id}")
        return parse_record(Group, data)

    async def add(self, group: PayloadLike) -> Group:
        data = await self._transport.post("add_group", dump_payload(group))
        return parse_record(Group, data)

    async def update(self, group_id: int, group: PayloadLike) -> Group:
        data = await self._transport.post(f"update_group/{group_id}", dump_payload(group))
        return parse_record(Group, data)

    async def delete(self, group_id: int) -> None:
        await self._transport.post(f"delete_group/{group_id}")


class RolesResource(Resource):
    async def list(self, offset: int = 0, limit: int = DEFAULT_LIMIT) -> list[Role]:
        data = await self._transport.get("get_roles", params=page_params(offset, limit))
        return parse_records(Role, unwrap(data, "roles"))
