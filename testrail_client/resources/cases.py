from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.cases import Case, CaseFilters, CaseHistory
from .base import Resource, flag, unwrap


class CasesResource(Resource):
    """Test cases, including bulk update/copy/move/delete and change history."""

    async def list(
        self, project_id: int, filters: Optional[CaseFilters] = None
    ) -> list[Case]:
        """
        Return cases of a project.

        ``filters.suite_id`` is required by TestRail for projects that are not
        in single-suite mode.
        """
        data = await self._transport.get(
            f"get_cases/{project_id}", params=dump_filters(filters)
        )
        return parse_records(Case, unwrap(data, "cases"))

    async def get(self, case_id: int) -> Case:
        data = await self._transport.get(f"get_case/{case_id}")
        return parse_record(Case, data)

    async def add(self, section_id: int, case: PayloadLike) -> Case:
        data = await self._transport.post(f"add_case/{section_id}", dump_payload(case))
        return parse_record(Case, data)

    async def update(self, case_id: int, case: PayloadLike) -> Case:
        data = await self._transport.post(f"update_case/{case_id}", dump_payload(case))
        return parse_record(Case, data)

    async def update_bulk(
        self, suite_id: int, case_ids: Sequence[int], updates: PayloadLike
    ) -> list[Case]:
        """Apply the same field values to several cases of one suite."""
        body = {"case_ids": list(case_ids), **(dump_payload(updates) or {})}
        data = await self._transport.post(f"update_cases/{suite_id}", body)
        return parse_records(Case, unwrap(data, "updated_cases"))

    async def copy_to_section(self, section_id: int, case_ids: Sequence[int]) -> None:
        await self._transport.post(
            f"copy_cases_to_section/{section_id}", {"case_ids": list(case_ids)}
        )

    async def move_to_section(
        self, section_id: int, suite_id: int, case_ids: Sequence[int]
    ) -> None:
        await self._transport.post(
            f"move_cases_to_section/{section_id}",
            {"suite_id": suite_id, "case_ids": list(case_ids)},
        )

    async def delete(self, case_id: int, soft: bool = False) -> None:
        """
        Delete a case.

        With ``soft=True`` TestRail only reports what would be deleted.
        """
        await self._transport.post(f"delete_case/{case_id}", {"soft": flag(soft)})

    async def delete_bulk(
        self,
        suite_id: int,
        project_id: int,
        case_ids: Sequence[int],
        soft: bool = False,
    ) -> None:
        await self._transport.post(
            f"delete_cases/{suite_id}",
            {"project_id": project_id, "case_ids": list(case_ids), "soft": flag(soft)},
        )

    async def get_history(self, case_id: int) -> list[CaseHistory]:
        data = await self._transport.get(f"get_history_for_case/{case_id}")
        return parse_records(CaseHistory, unwrap(data, "history"))
