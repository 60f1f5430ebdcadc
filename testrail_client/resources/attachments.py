"""Attachment upload, download and listing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from ..models.attachments import AddedAttachment, Attachment, AttachmentId
from ..models.base import parse_record, parse_records
from .base import Resource, unwrap

ATTACHMENT_FIELD = "attachment"
ATTACHMENT_CONTENT_TYPE = "application/octet-stream"

PathLike = Union[str, os.PathLike]


class AttachmentsResource(Resource):
    """
    Attachments on cases, plans, plan entries, runs and results.

    Uploads stream the file from disk as a multipart form with a single
    ``attachment`` field. A missing file raises
    ``FileNotFoundError`` before any request is made.
    """

    async def _upload(self, endpoint: str, file_path: PathLike) -> AddedAttachment:
        path = Path(file_path)
        with open(path, "rb") as handle:
            self._transport.logger.debug(
                f"Uploading attachment {path.name} ({path.stat().st_size} bytes) to {endpoint}"
            )
            data = await self._transport.post_files(
                endpoint,
                {ATTACHMENT_FIELD: (path.name, handle, ATTACHMENT_CONTENT_TYPE)},
            )
        return parse_record(AddedAttachment, data)

    async def add_to_case(self, case_id: int, file_path: PathLike) -> AddedAttachment:
        return await self._upload(f"add_attachment_to_case/{case_id}", file_path)

    async def add_to_plan(self, plan_id: int, file_path: PathLike) -> AddedAttachment:
        return await self._upload(f"add_attachment_to_plan/{plan_id}", file_path)

    async def add_to_plan_entry(
        self, plan_id: int, entry_id: str, file_path: PathLike
    ) -> AddedAttachment:
        return await self._upload(
            f"add_attachment_to_plan_entry/{plan_id}/{entry_id}", file_path
        )

    async def add_to_run(self, run_id: int, file_path: PathLike) -> AddedAttachment:
        return await self._upload(f"add_attachment_to_run/{run_id}", file_path)

    async def add_to_result(
        self, result_id: int, file_path: PathLike
    ) -> AddedAttachment:
        return await self._upload(f"add_attachment_to_result/{result_id}", file_path)

    async def get(self, attachment_id: AttachmentId) -> bytes:
        """Download the raw attachment content."""
        return await self._transport.get_bytes(f"get_attachment/{attachment_id}")

    async def delete(self, attachment_id: AttachmentId) -> None:
        await self._transport.post(f"delete_attachment/{attachment_id}")

    async def _list(self, endpoint: str) -> list[Attachment]:
        data = await self._transport.get(endpoint)
        return parse_records(Attachment, unwrap(data, "attachments"))

    async def list_for_case(self, case_id: int) -> list[Attachment]:
        return await self._list(f"get_attachments_for_case/{case_id}")

    async def list_for_plan(self, plan_id: int) -> list[Attachment]:
        return await self._list(f"get_attachments_for_plan/{plan_id}")

    async def list_for_plan_entry(
        self, plan_id: int, entry_id: str
    ) -> list[Attachment]:
        return await self._list(f"get_attachments_for_plan_entry/{plan_id}/{entry_id}")

    async def list_for_run(self, run_id: int) -> list[Attachment]:
        return await self._list(f"get_attachments_for_run/{run_id}")

    async def list_for_test(self, test_id: int) -> list[Attachment]:
        return await self._list(f"get_attachments_for_test/{test_id}")
