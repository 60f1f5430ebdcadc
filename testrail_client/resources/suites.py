from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.suites import Section, Suite
from .base import DEFAULT_LIMIT, Resource, flag, unwrap


class SuitesResource(Resource):
    async def list(self, project_id: int) -> list[Suite]:
        data = await self._transport.get(f"get_suites/{project_id}")
        return parse_records(Suite, unwrap(data, "suites"))

    async def get(self, suite_id: int) -> Suite:
        data = await self._transport.get(f"get_suite/{suite_id}")
        return parse_record(Suite, data)

    async def add(self, project_id: int, suite: PayloadLike) -> Suite:
        data = await self._transport.post(f"add_suite/{project_id}", dump_payload(suite))
        return parse_record(Suite, data)

    async def update(self, suite_id: int, suite: PayloadLike) -> Suite:
        data = await self._transport.post(f"update_suite/{suite_id}", dump_payload(suite))
        return parse_record(Suite, data)

    async def delete(self, suite_id: int, soft: Optional[bool] = None) -> None:
        """Delete a suite and its active runs. ``soft`` is only sent when given."""
        body = None if soft is None else {"soft": flag(soft)}
        await self._transport.post(f"delete_suite/{suite_id}", body)


class SectionsResource(Resource):
    async def list(
        self,
        project_id: int,
        suite_id: Optional[int] = None,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Section]:
        data = await self._transport.get(
            f"get_sections/{project_id}",
            params={"suite_id": suite_id, "offset": offset, "limit": limit},
        )
        return parse_records(Section, unwrap(data, "sections"))

    async def get(self, section_id: int) -> Section:
        data = await self._transport.get(f"get_section/{section_id}")
        return parse_record(Section, data)

    async def add(self, project_id: int, section: PayloadLike) -> Section:
        data = await self._transport.post(
            f"add_section/{project_id}", dump_payload(section)
        )
        return parse_record(Section, data)

    async def update(self, section_id: int, section: PayloadLike) -> Section:
        data = await self._transport.post(
            f"update_section/{section_id}", dump_payload(section)
        )
        return parse_record(Section, data)

    async def move(self, section_id: int, move: PayloadLike) -> Section:
        """Move a section under another parent and/or after a sibling."""
        data = await self._transport.post(
            f"move_section/{section_id}", dump_payload(move)
        )
        return parse_record(Section, data)

    async def delete(self, section_id: int, soft: bool = False) -> None:
        await self._transport.post(f"delete_section/{section_id}", {"soft": flag(soft)})
