from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.results import (
    Result,
    ResultField,
    ResultFilters,
    ResultForRunFilters,
)
from .base import DEFAULT_LIMIT, Resource, page_params, unwrap

BulkResults = Union[PayloadLike, Sequence[PayloadLike]]


def _bulk_body(results: BulkResults) -> dict[str, Any]:
    """Accept ``{"results": [...]}`` (model or mapping) or a plain list of entries."""
    if isinstance(results, Sequence) and not isinstance(results, (str, bytes, Mapping)):
        return {"results": [dump_payload(entry) for entry in results]}
    return dump_payload(results) or {"results": []}


class ResultsResource(Resource):
    """
    Test results.

    The bulk methods post every entry in a single request; TestRail applies
    them atomically and the client reports whatever the server answers.
    """

    async def list(
        self,
        test_id: int,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        filters: Optional[ResultFilters] = None,
    ) -> list[Result]:
        data = await self._transport.get(
            f"get_results/{test_id}", params=page_params(offset, limit, filters)
        )
        return parse_records(Result, unwrap(data, "results"))

    async def list_for_case(
        self,
        run_id: int,
        case_id: int,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        filters: Optional[ResultFilters] = None,
    ) -> list[Result]:
        data = await self._transport.get(
            f"get_results_for_case/{run_id}/{case_id}",
            params=page_params(offset, limit, filters),
        )
        return parse_records(Result, unwrap(data, "results"))

    async def list_for_run(
        self,
        run_id: int,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        filters: Optional[ResultForRunFilters] = None,
    ) -> list[Result]:
        data = await self._transport.get(
            f"get_results_for_run/{run_id}", params=page_params(offset, limit, filters)
        )
        return parse_records(Result, unwrap(data, "results"))

    async def get(self, result_id: int) -> Result:
        data = await self._transport.get(f"get_result/{result_id}")
        return parse_record(Result, data)

    async def add(self, test_id: int, result: PayloadLike) -> Result:
        data = await self._transport.post(f"add_result/{test_id}", dump_payload(result))
        return parse_record(Result, data)

    async def add_for_case(
        self, run_id: int, case_id: int, result: PayloadLike
    ) -> Result:
        data = await self._transport.post(
            f"add_result_for_case/{run_id}/{case_id}", dump_payload(result)
        )
        return parse_record(Result, data)

    async def add_for_cases(self, run_id: int, results: BulkResults) -> list[Result]:
        """Add results keyed by case ID to a run in one request."""
        data = await self._transport.post(
            f"add_results_for_cases/{run_id}", _bulk_body(results)
        )
        return parse_records(Result, unwrap(data, "results"))

    async def add_for_tests(self, run_id: int, results: BulkResults) -> list[Result]:
        """Add results keyed by test ID to a run in one request (``add_results``)."""
        data = await self._transport.post(f"add_results/{run_id}", _bulk_body(results))
        return parse_records(Result, unwrap(data, "results"))


class ResultFieldsResource(Resource):
    async def list(
        self, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> list[ResultField]:
        data = await self._transport.get(
            "get_result_fields", params=page_params(offset, limit)
        )
        return parse_records(ResultField, unwrap(data, "result_fields"))
