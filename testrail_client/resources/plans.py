from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.plans import Plan, PlanFilters
from .base import Resource, unwrap


class PlansResource(Resource):
    """
    Test plans and their entries.

    A plan groups entries; each entry holds one or more runs of the same
    suite (one per configuration). Entry IDs are strings (GUIDs), plan and
    run IDs are integers.
    """

    async def list(
        self, project_id: int, filters: Optional[PlanFilters] = None
    ) -> list[Plan]:
        data = await self._transport.get(
            f"get_plans/{project_id}", params=dump_filters(filters)
        )
        return parse_records(Plan, unwrap(data, "plans"))

    async def get(self, plan_id: int) -> Plan:
        data = await self._transport.get(f"get_plan/{plan_id}")
        return parse_record(Plan, data)

    async def add(self, project_id: int, plan: PayloadLike) -> Plan:
        data = await self._transport.post(f"add_plan/{project_id}", dump_payload(plan))
        return parse_record(Plan, data)

    async def update(self, plan_id: int, plan: PayloadLike) -> Plan:
        data = await self._transport.post(f"update_plan/{plan_id}", dump_payload(plan))
        return parse_record(Plan, data)

    async def close(self, plan_id: int) -> Plan:
        data = await self._transport.post(f"close_plan/{plan_id}")
        return parse_record(Plan, data)

    async def delete(self, plan_id: int) -> None:
        await self._transport.post(f"delete_plan/{plan_id}")

    async def add_entry(self, plan_id: int, entry: PayloadLike) -> Plan:
        data = await self._transport.post(
            f"add_plan_entry/{plan_id}", dump_payload(entry)
        )
        return parse_record(Plan, data)

    async def update_entry(
        self, plan_id: int, entry_id: str, entry: PayloadLike
    ) -> Plan:
        data = await self._transport.post(
            f"update_plan_entry/{plan_id}/{entry_id}", dump_payload(entry)
        )
        return parse_record(Plan, data)

    async def delete_entry(self, plan_id: int, entry_id: str) -> None:
        await self._transport.post(f"delete_plan_entry/{plan_id}/{entry_id}")

    async def add_run_to_entry(
        self, plan_id: int, entry_id: str, run: PayloadLike
    ) -> Plan:
        data = await self._transport.post(
            f"add_run_to_plan_entry/{plan_id}/{entry_id}", dump_payload(run)
        )
        return parse_record(Plan, data)

    async def update_run_in_entry(self, run_id: int, run: PayloadLike) -> Plan:
        data = await self._transport.post(
            f"update_run_in_plan_entry/{run_id}", dump_payload(run)
        )
        return parse_record(Plan, data)

    async def delete_run_from_entry(self, run_id: int) -> None:
        await self._transport.post(f"delete_run_from_plan_entry/{run_id}")
