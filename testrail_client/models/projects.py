from typing import Optional

from .base import Filters, Payload, Record


class Project(Record):
    """A TestRail project."""

    id: Optional[int] = None
    name: Optional[str] = None
    announcement: Optional[str] = None
    show_announcement: Optional[bool] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[int] = None
    suite_mode: Optional[int] = None
    default_role_id: Optional[int] = None
    default_role_name: Optional[str] = None
    master_id: Optional[int] = None
    master_name: Optional[str] = None
    refs_pattern: Optional[str] = None
    refs_pattern_error: Optional[str] = None
    url: Optional[str] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    updated_on: Optional[int] = None
    updated_by: Optional[int] = None


class AddProject(Payload):
    name: str
    announcement: Optional[str] = None
    show_announcement: Optional[bool] = None
    suite_mode: Optional[int] = None


class UpdateProject(Payload):
    name: Optional[str] = None
    announcement: Optional[str] = None
    show_announcement: Optional[bool] = None
    is_completed: Optional[bool] = None


class ProjectFilters(Filters):
    is_completed: Optional[int] = None
    suite_mode: Optional[int] = None
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[list[int]] = None
    updated_after: Optional[int] = None
    updated_before: Optional[int] = None
    updated_by: Optional[list[int]] = None
