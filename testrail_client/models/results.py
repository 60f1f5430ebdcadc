from typing import Any, Optional

from .base import Filters, Payload, Record


class Result(Record):
    """A result recorded against a test. Custom result fields are extras."""

    id: Optional[int] = None
    test_id: Optional[int] = None
    case_id: Optional[int] = None
    run_id: Optional[int] = None
    status_id: Optional[int] = None
    created_by: Optional[int] = None
    created_on: Optional[int] = None
    assignedto_id: Optional[int] = None
    comment: Optional[str] = None
    version: Optional[str] = None
    elapsed: Optional[str] = None
    defects: Optional[str] = None
    attachment_ids: Optional[list[Any]] = None


class AddResult(Payload):
    status_id: Optional[int] = None
    comment: Optional[str] = None
    version: Optional[str] = None
    elapsed: Optional[str] = None
    defects: Optional[str] = None
    assignedto_id: Optional[int] = None


class TestResultEntry(AddResult):
    """One item of a bulk ``add_results`` request."""

    test_id: int


class CaseResultEntry(AddResult):
    """One item of a bulk ``add_results_for_cases`` request."""

    case_id: int


class AddResults(Payload):
    results: list[TestResultEntry]


class AddResultsForCases(Payload):
    results: list[CaseResultEntry]


class ResultFilters(Filters):
    status_id: Optional[list[int]] = None
    defects_filter: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None


class ResultForRunFilters(ResultFilters):
    assignedto_id: Optional[list[int]] = None
    created_after: Optional[int] = None
    created_before: Optional[int] = None
    created_by: Optional[list[int]] = None


class ResultField(Record):
    """A custom result field definition."""

    id: Optional[int] = None
    name: Optional[str] = None
    system_name: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    type_id: Optional[int] = None
    location_id: Optional[int] = None
    display_order: Optional[int] = None
    include_all: Optional[bool] = None
    is_active: Optional[bool] = None
    template_ids: Optional[list[int]] = None
    configs: Optional[list[dict[str, Any]]] = None
