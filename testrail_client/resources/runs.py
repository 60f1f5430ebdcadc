from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.runs import Run, RunFilters, Test, TestFilters
from .base import Resource, unwrap


class RunsResource(Resource):
    async def list(
        self, project_id: int, filters: Optional[RunFilters] = None
    ) -> list[Run]:
        data = await self._transport.get(
            f"get_runs/{project_id}", params=dump_filters(filters)
        )
        return parse_records(Run, unwrap(data, "runs"))

    async def get(self, run_id: int) -> Run:
        data = await self._transport.get(f"get_run/{run_id}")
        return parse_record(Run, data)

    async def add(self, project_id: int, run: PayloadLike) -> Run:
        data = await self._transport.post(f"add_run/{project_id}", dump_payload(run))
        return parse_record(Run, data)

    async def update(self, run_id: int, run: PayloadLike) -> Run:
        data = await self._transport.post(f"update_run/{run_id}", dump_payload(run))
        return parse_record(Run, data)

    async def close(self, run_id: int) -> Run:
        """Close (archive) a run; closed runs can no longer be edited."""
        data = await self._transport.post(f"close_run/{run_id}")
        return parse_record(Run, data)

    async def delete(self, run_id: int) -> None:
        await self._transport.post(f"delete_run/{run_id}")


class TestsResource(Resource):
    """Tests are read-only: TestRail creates them when a run is added."""

    async def list(
        self, run_id: int, filters: Optional[TestFilters] = None
    ) -> list[Test]:
        data = await self._transport.get(
            f"get_tests/{run_id}", params=dump_filters(filters)
        )
        return parse_records(Test, unwrap(data, "tests"))

    async def get(self, test_id: int, with_data: Optional[str] = None) -> Test:
        data = await self._transport.get(
            f"get_test/{test_id}", params={"with_data": with_data}
        )
        return parse_record(Test, data)
