from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.milestones import Milestone, MilestoneFilters
from .base import Resource, unwrap


class MilestonesResource(Resource):
    async def list(
        self, project_id: int, filters: Optional[MilestoneFilters] = None
    ) -> list[Milestone]:
        data = await self._transport.get(
            f"get_milestones/{project_id}", params=dump_filters(filters)
        )
        return parse_records(Milestone, unwrap(data, "milestones"))

    async def get(self, milestone_id: int) -> Milestone:
        data = await self._transport.get(f"get_milestone/{milestone_id}")
        return parse_record(Milestone, data)

    async def add(self, project_id: int, milestone: PayloadLike) -> Milestone:
        data = await self._transport.post(
            f"add_milestone/{project_id}", dump_payload(milestone)
        )
        return parse_record(Milestone, data)

    async def update(self, milestone_id: int, milestone: PayloadLike) -> Milestone:
        data = await self._transport.post(
            f"update_milestone/{milestone_id}", dump_payload(milestone)
        )
        return parse_record(Milestone, data)

    async def delete(self, milestone_id: int) -> None:
        await self._transport.post(f"delete_milestone/{milestone_id}")
