from typing import Any, Optional, Union

from .base import Filters, Payload, Record

IdOrIds = Union[int, list[int]]


class CaseStep(Record):
    """One step of a case using the "steps separated" template."""

    content: Optional[str] = None
    expected: Optional[str] = None
    additional_info: Optional[str] = None
    refs: Optional[str] = None
    shared_step_id: Optional[int] = None


class Case(Record):
    """A test case. Custom fields beyond the common ones are kept as extras."""

    id: Optional[int] = None
    title: Optional[str] = None
    section_id: Optional[int] = None
    template_id: Optional[int] = None
    type_id: Optional[int] = None
    priority_id: Optional[int] = None
    milestone_id: Optional[int] = None
    refs: Optional[str] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    updated_on: Optional[int] = None
    updated_by: Optional[int] = None
    estimate: Optional[str] = None
    estimate_forecast: Optional[str] = None
    suite_id: Optional[int] = None
    display_order: Optional[int] = None
    is_deleted: Optional[int] = None
    custom_automation_type: Optional[int] = None
    custom_preconds: Optional[str] = None
    custom_steps: Optional[str] = None
    custom_expected: Optional[str] = None
    custom_steps_separated: Optional[list[CaseStep]] = None
    custom_mission: Optional[str] = None
    custom_goals: Optional[str] = None


class AddCase(Payload):
    title: str
    template_id: Optional[int] = None
    type_id: Optional[int] = None
    priority_id: Optional[int] = None
    estimate: Optional[str] = None
    milestone_id: Optional[int] = None
    refs: Optional[str] = None
    custom_preconds: Optional[str] = None
    custom_steps: Optional[str] = None
    custom_expected: Optional[str] = None
    custom_steps_separated: Optional[list[CaseStep]] = None
    custom_mission: Optional[str] = None
    custom_goals: Optional[str] = None


class UpdateCase(Payload):
    title: Optional[str] = None
    section_id: Optional[int] = None
    template_id: Optional[int] = None
    type_id: Optional[int] = None
    priority_id: Optional[int] = None
    estimate: Optional[str] = None
    milestone_id: Optional[int] = None
    refs: Optional[str] = None
    custom_preconds: Optional[str] = None
    custom_steps: Optional[str] = None
    custom_expected: Optional[str] = None
    custom_steps_separated: Optional[list[CaseStep]] = None
    custom_mission: Optional[str] = None
    custom_goals: Optional[str] = None


class CaseFilters(Filters):
    suite_id: Optional[int] = None
    section_id: Optional[int] = None
    template_id: Optional[IdOrIds] = None
    type_id: Optional[IdOrIds] = None
    priority_id: Optional[IdOrIds] = None
    milestone_id: Optional[IdOrIds] = None
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[IdOrIds] = None
    updated_after: Optional[int] = None
    updated_before: Optional[int] = None
    updated_by: Optional[IdOrIds] = None
    filter: Optional[str] = None
    refs: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class CaseHistory(Record):
    """One entry of a case's change history."""

    id: Optional[int] = None
    type_id: Optional[int] = None
    changes: Optional[Any] = None
    created_on: Optional[int] = None
    user_id: Optional[int] = None
    case_id: Optional[int] = None
    version_id: Optional[int] = None


class BddCase(Case):
    """A case created from a Gherkin feature."""

    custom_testrail_bdd_scenario: Optional[Any] = None
