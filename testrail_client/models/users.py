from typing import Optional

from .base import Filters, Payload, Record


class User(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    email_notifications: Optional[bool] = None
    is_active: Optional[bool] = None
    is_admin: Optional[bool] = None
    role_id: Optional[int] = None
    role: Optional[str] = None
    group_ids: Optional[list[int]] = None
    mfa_required: Optional[bool] = None
    sso_enabled: Optional[bool] = None
    assigned_projects: Optional[list[int]] = None


class AddUser(Payload):
    email: str
    name: str
    role_id: Optional[int] = None
    is_active: Optional[bool] = None
    is_admin: Optional[bool] = None
    email_notifications: Optional[bool] = None
    group_ids: Optional[list[int]] = None
    mfa_required: Optional[bool] = None
    sso_enabled: Optional[bool] = None
    assigned_projects: Optional[list[int]] = None


class UpdateUser(Payload):
    email: Optional[str] = None
    name: Optional[str] = None
    role_id: Optional[int] = None
    is_active: Optional[bool] = None
    is_admin: Optional[bool] = None
    email_notifications: Optional[bool] = None
    group_ids: Optional[list[int]] = None
    mfa_required: Optional[bool] = None
    sso_enabled: Optional[bool] = None
    assigned_projects: Optional[list[int]] = None


class Group(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    user_ids: Optional[list[int]] = None


class AddGroup(Payload):
    name: str
    user_ids: Optional[list[int]] = None


class UpdateGroup(Payload):
    name: Optional[str] = None
    user_ids: Optional[list[int]] = None


class GroupFilters(Filters):
    project_id: Optional[int] = None
    name: Optional[str] = None
