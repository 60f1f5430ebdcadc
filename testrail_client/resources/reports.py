from __future__ import annotations

from ..models.base import parse_record, parse_records
from ..models.reports import Report, ReportRun
from .base import DEFAULT_LIMIT, Resource, page_params, unwrap


class ReportsResource(Resource):
    async def list(
        self, project_id: int, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> list[Report]:
        """Return the report templates of a project that allow API access."""
        data = await self._transport.get(
            f"get_reports/{project_id}", params=page_params(offset, limit)
        )
        return parse_records(Report, unwrap(data, "reports"))

    async def run(self, report_id: int) -> ReportRun:
        data = await self._transport.post(f"reports/{report_id}/run")
        return parse_record(ReportRun, data)
