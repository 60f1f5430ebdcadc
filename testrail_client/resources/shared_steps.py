from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.shared_steps import SharedStep, SharedStepFilters
from .base import DEFAULT_LIMIT, Resource, flag, page_params, unwrap


class SharedStepsResource(Resource):
    """Shared step sets (TestRail 7.0+)."""

    async def list(
        self,
        project_id: int,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        filters: Optional[SharedStepFilters] = None,
    ) -> list[SharedStep]:
        data = await self._transport.get(
            f"get_shared_steps/{project_id}", params=page_params(offset, limit, filters)
        )
        return parse_records(SharedStep, unwrap(data, "shared_steps"))

    async def get(self, shared_step_id: int) -> SharedStep:
        data = await self._transport.get(f"get_shared_step/{shared_step_id}")
        return parse_record(SharedStep, data)

    async def add(self, project_id: int, shared_step: PayloadLike) -> SharedStep:
        data = await self._transport.post(
            f"add_shared_step/{project_id}", dump_payload(shared_step)
        )
        return parse_record(SharedStep, data)

    async def update(self, shared_step_id: int, shared_step: PayloadLike) -> SharedStep:
        data = await self._transport.post(
            f"update_shared_step/{shared_step_id}", dump_payload(shared_step)
        )
        return parse_record(SharedStep, data)

    async def delete(
        self, shared_step_id: int, keep_in_cases: Optional[bool] = None
    ) -> None:
        """
        Delete a shared step set.

        TestRail keeps the steps in the cases that used them unless
        ``keep_in_cases=False`` is passed.
        """
        body = None if keep_in_cases is None else {"keep_in_cases": flag(keep_in_cases)}
        await self._transport.post(f"delete_shared_step/{shared_step_id}", body)

    async def get_cases(self, shared_step_id: int) -> list[int]:
        """Return the IDs of the cases using a shared step set."""
        data = await self._transport.get(f"get_shared_step/{shared_step_id}/get_cases")
        return unwrap(data, "case_ids")
