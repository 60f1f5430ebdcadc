"""Read-mostly metadata: case fields, case types, priorities, statuses, templates."""

from __future__ import annotations

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.fields import (
    CaseField,
    CaseStatus,
    CaseType,
    Priority,
    Status,
    Template,
)
from .base import DEFAULT_LIMIT, Resource, page_params, unwrap


class CaseFieldsResource(Resource):
    async def list(self) -> list[CaseField]:
        data = await self._transport.get("get_case_fields")
        return parse_records(CaseField, unwrap(data, "case_fields"))

    async def add(self, field: PayloadLike) -> CaseField:
        data = await self._transport.post("add_case_field", dump_payload(field))
        return parse_record(CaseField, data)


class CaseTypesResource(Resource):
    async def list(self) -> list[CaseType]:
        data = await self._transport.get("get_case_types")
        return parse_records(CaseType, unwrap(data, "case_types"))


class PrioritiesResource(Resource):
    async def list(self) -> list[Priority]:
        data = await self._transport.get("get_priorities")
        return parse_records(Priority, unwrap(data, "priorities"))


class StatusesResource(Resource):
    async def list(self) -> list[Status]:
        data = await self._transport.get("get_statuses")
        return parse_records(Status, unwrap(data, "statuses"))

    async def list_case_statuses(
        self, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> list[CaseStatus]:
        """Return case approval statuses (Enterprise only)."""
        data = await self._transport.get(
            "get_case_statuses", params=page_params(offset, limit)
        )
        return parse_records(CaseStatus, unwrap(data, "case_statuses"))


class TemplatesResource(Resource):
    """
    Case templates.

    Only ``get_templates`` is a classic endpoint; the single-template
    operations use the resource-style ``templates/<id>`` paths.
    """

    async def list(self, project_id: int) -> list[Template]:
        data = await self._transport.get(f"get_templates/{project_id}")
        return parse_records(Template, unwrap(data, "templates"))

    async def get(self, template_id: int) -> Template:
        data = await self._transport.get(f"templates/{template_id}")
        return parse_record(Template, data)

    async def add(self, project_id: int, template: PayloadLike) -> Template:
        data = await self._transport.post(
            f"projects/{project_id}/templates", dump_payload(template)
        )
        return parse_record(Template, data)

    async def update(self, template_id: int, template: PayloadLike) -> Template:
        data = await self._transport.post(
            f"templates/{template_id}", dump_payload(template)
        )
        return parse_record(Template, data)

    async def delete(self, template_id: int) -> None:
        await self._transport.post(f"templates/{template_id}")
