from typing import Optional, Union

from .base import Filters, Payload, Record


class Run(Record):
    """A test run, standalone or part of a plan."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    suite_id: Optional[int] = None
    milestone_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[int] = None
    config: Optional[str] = None
    config_ids: Optional[list[int]] = None
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
    plan_id: Optional[int] = None
    refs: Optional[str] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    updated_on: Optional[int] = None
    url: Optional[str] = None


class AddRun(Payload):
    name: str
    suite_id: Optional[int] = None
    description: Optional[str] = None
    milestone_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    refs: Optional[str] = None


class UpdateRun(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    milestone_id: Optional[int] = None
    include_all: Optional[bool] = None
    case_ids: Optional[list[int]] = None
    refs: Optional[str] = None


class RunFilters(Filters):
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[Union[int, list[int]]] = None
    is_completed: Optional[bool] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    milestone_id: Optional[Union[int, list[int]]] = None
    refs_filter: Optional[str] = None
    suite_id: Optional[Union[int, list[int]]] = None


class Test(Record):
    """A test: one case instantiated inside a run."""

    id: Optional[int] = None
    case_id: Optional[int] = None
    status_id: Optional[int] = None
    assignedto_id: Optional[int] = None
    run_id: Optional[int] = None
    title: Optional[str] = None
    template_id: Optional[int] = None
    type_id: Optional[int] = None
    priority_id: Optional[int] = None
    estimate: Optional[str] = None
    estimate_forecast: Optional[str] = None
    refs: Optional[str] = None
    milestone_id: Optional[int] = None
    custom_preconds: Optional[str] = None
    custom_steps: Optional[str] = None
    custom_expected: Optional[str] = None
    custom_mission: Optional[str] = None
    custom_goals: Optional[str] = None


class TestFilters(Filters):
    status_id: Optional[list[int]] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
    with_data: Optional[str] = None
