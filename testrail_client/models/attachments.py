from typing import Optional, Union

from .base import Record

AttachmentId = Union[int, str]


class Attachment(Record):
    """
    Attachment metadata.

    TestRail 7.1 switched attachment IDs from integers to string UUIDs, so
    ``id`` accepts both.
    """

    id: Optional[AttachmentId] = None
    name: Optional[str] = None
    filename: Optional[str] = None
    size: Optional[int] = None
    created_on: Optional[int] = None
    project_id: Optional[int] = None
    case_id: Optional[int] = None
    user_id: Optional[int] = None
    result_id: Optional[int] = None
    entity_attachments_id: Optional[int] = None
    icon_name: Optional[str] = None
    client_id: Optional[int] = None
    entity_type: Optional[str] = None
    data_id: Optional[str] = None
    entity_id: Optional[str] = None
    filetype: Optional[str] = None
    legacy_id: Optional[int] = None
    is_image: Optional[bool] = None
    icon: Optional[str] = None


class AddedAttachment(Record):
    attachment_id: Optional[AttachmentId] = None
