from typing import Optional

from .base import Filters, Payload, Record


class Milestone(Record):
    """A milestone; may contain sub-milestones."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    start_on: Optional[int] = None
    started_on: Optional[int] = None
    due_on: Optional[int] = None
    completed_on: Optional[int] = None
    parent_id: Optional[int] = None
    project_id: Optional[int] = None
    refs: Optional[str] = None
    url: Optional[str] = None
    is_completed: Optional[bool] = None
    is_started: Optional[bool] = None
    milestones: Optional[list["Milestone"]] = None


class AddMilestone(Payload):
    name: str
    description: Optional[str] = None
    due_on: Optional[int] = None
    start_on: Optional[int] = None
    parent_id: Optional[int] = None
    refs: Optional[str] = None


class UpdateMilestone(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    due_on: Optional[int] = None
    start_on: Optional[int] = None
    parent_id: Optional[int] = None
    refs: Optional[str] = None
    is_completed: Optional[bool] = None
    is_started: Optional[bool] = None


class MilestoneFilters(Filters):
    is_completed: Optional[bool] = None
    is_started: Optional[bool] = None
    parent_id: Optional[int] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
