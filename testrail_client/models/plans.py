from typing import Optional, Union

from .base import Filters, Payload, Record
from .runs import Run


class PlanEntryRun(Run):
    """A run inside a plan entry (one per configuration)."""

    entry_index: Optional[int] = None
    entry_id: Optional[str] = None


class PlanEntry(Record):
    """A group of runs in a plan sharing a suite."""

    id: Optional[str] = None
    suite_id: Optional[int] = None
    name: Optional[str] = None
    refs: Optional[str] = None
    description: Optional[str] = None
    include_all: Optional[bool] = None
    runs: Optional[list[PlanEntryRun]] = None


class Plan(Record):
    """A test plan."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    milestone_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[int] = None
    passed_count: Optional[int] = None
    blocked_count: Optional[int] = None
    untested_count: Optional[int] = None
    retest_count: Optional[int] = None
    failed_count: Optional[int] = None
    custom_status1_count: Optional[int] = None
    custom_status2_count: Optional[int] = None
    custom_status3_count: Optional[int] = None
    custom_status4_count: Optional[int] = None
    custom_status5_count: Optional[int] = None
    custom_status6_count: Optional[int] = None
    custom_status7_count: Optional[int] = None
    project_id: Optional[int] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    url: Optional[str] = None
    entries: Optional[list[PlanEntry]] = None


class PlanEntryRunSpec(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    config_ids: Optional[list[int]] = None


class AddPlanEntry(Payload):
    suite_id: int
    name: Optional[str] = None
    description: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    config_ids: Optional[list[int]] = None
    runs: Optional[list[PlanEntryRunSpec]] = None


class UpdatePlanEntry(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    refs: Optional[str] = None


class AddPlan(Payload):
    name: str
    description: Optional[str] = None
    milestone_id: Optional[int] = None
    entries: Optional[list[AddPlanEntry]] = None


class UpdatePlan(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    milestone_id: Optional[int] = None


class AddRunToPlanEntry(Payload):
    config_ids: list[int]
    description: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    refs: Optional[str] = None


class UpdateRunInPlanEntry(Payload):
    description: Optional[str] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    refs: Optional[str] = None


class PlanFilters(Filters):
    is_completed: Optional[bool] = None
    milestone_id: Optional[Union[int, list[int]]] = None
    assignedto_id: Optional[Union[int, list[int]]] = None
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[Union[int, list[int]]] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
