"""Case fields, case types, priorities, statuses, roles and templates."""

from typing import Any, Optional

from .base import Payload, Record


class FieldContext(Record):
    is_global: Optional[bool] = None
    project_ids: Optional[list[int]] = None


class FieldConfig(Record):
    context: Optional[FieldContext] = None
    options: Optional[dict[str, Any]] = None


class CaseField(Record):
    """A custom case field definition."""

    id: Optional[int] = None
    type_id: Optional[int] = None
    name: Optional[str] = None
    system_name: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    include_all: Optional[bool] = None
    template_ids: Optional[list[int]] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None
    status_ids: Optional[list[int]] = None
    is_system: Optional[bool] = None
    configs: Optional[list[FieldConfig]] = None


class AddCaseField(Payload):
    """
    New custom case field.

    ``type`` is one of TestRail's type names: String, Integer, Text, URL,
    Checkbox, Dropdown, User, Date, Milestone, Steps or Multi-select.
    """

    type: str
    name: str
    label: str
    description: Optional[str] = None
    include_all: Optional[bool] = None
    template_ids: Optional[list[int]] = None
    configs: list[FieldConfig]


class CaseType(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    is_default: Optional[bool] = None


class Priority(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    short_name: Optional[str] = None
    is_default: Optional[bool] = None
    priority: Optional[int] = None


class Status(Record):
    """A result status (Passed, Blocked, custom statuses ...)."""

    id: Optional[int] = None
    name: Optional[str] = None
    label: Optional[str] = None
    color_dark: Optional[int] = None
    color_medium: Optional[int] = None
    color_bright: Optional[int] = None
    is_system: Optional[bool] = None
    is_untested: Optional[bool] = None
    is_final: Optional[bool] = None


class CaseStatus(Record):
    """A case approval status (TestRail Enterprise 7.3+)."""

    case_status_id: Optional[int] = None
    name: Optional[str] = None
    abbreviation: Optional[str] = None
    is_default: Optional[bool] = None
    is_approved: Optional[bool] = None


class Role(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    is_default: Optional[bool] = None
    is_project_admin: Optional[bool] = None


class Template(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    is_default: Optional[bool] = None


class AddTemplate(Payload):
    name: str
    is_default: Optional[bool] = None


class UpdateTemplate(Payload):
    name: Optional[str] = None
    is_default: Optional[bool] = None
