from typing import Optional

from .base import Filters, Payload, Record
from .cases import CaseStep


class SharedStep(Record):
    """A set of steps reusable across cases."""

    id: Optional[int] = None
    title: Optional[str] = None
    project_id: Optional[int] = None
    created_by: Optional[int] = None
    created_on: Optional[int] = None
    updated_by: Optional[int] = None
    updated_on: Optional[int] = None
    custom_steps_separated: Optional[list[CaseStep]] = None
    case_ids: Optional[list[int]] = None


class AddSharedStep(Payload):
    title: str
    custom_steps_separated: Optional[list[CaseStep]] = None


class UpdateSharedStep(Payload):
    title: Optional[str] = None
    custom_steps_separated: Optional[list[CaseStep]] = None


class SharedStepFilters(Filters):
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[list[int]] = None
    updated_after: Optional[int] = None
    updated_before: Optional[int] = None
    refs: Optional[str] = None
