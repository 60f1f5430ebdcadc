from __future__ import annotations

from ..models.base import parse_record
from ..models.cases import BddCase
from .base import Resource


class BddResource(Resource):
    """Gherkin import/export for BDD-template cases."""

    async def get(self, case_id: int) -> str:
        """Export a case as ``.feature`` text."""
        return await self._transport.get_text(f"get_bdd/{case_id}")

    async def add(self, section_id: int, feature: str) -> BddCase:
        """Import ``.feature`` text into a section, creating a case."""
        data = await self._transport.post_text(f"add_bdd/{section_id}", feature)
        return parse_record(BddCase, data)
