from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.projects import Project, ProjectFilters
from .base import DEFAULT_LIMIT, Resource, page_params, unwrap


class ProjectsResource(Resource):
    """Projects: ``get_projects``, ``add_project`` and friends."""

    async def list(
        self,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        filters: Optional[ProjectFilters] = None,
    ) -> list[Project]:
        data = await self._transport.get(
            "get_projects", params=page_params(offset, limit, filters)
        )
        return parse_records(Project, unwrap(data, "projects"))

    async def get(self, project_id: int) -> Project:
        data = await self._transport.get(f"get_project/{project_id}")
        return parse_record(Project, data)

    async def add(self, project: PayloadLike) -> Project:
        data = await self._transport.post("add_project", dump_payload(project))
        return parse_record(Project, data)

    async def update(self, project_id: int, project: PayloadLike) -> Project:
        data = await self._transport.post(
            f"update_project/{project_id}", dump_payload(project)
        )
        return parse_record(Project, data)

    async def delete(self, project_id: int) -> None:
        """Delete a project with all its suites, cases, runs and results. Cannot be undone."""
        await self._transport.post(f"delete_project/{project_id}")
