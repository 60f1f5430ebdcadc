from typing import Optional

from .base import Filters, Payload, Record


class Suite(Record):
    """A test suite."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    url: Optional[str] = None
    is_master: Optional[bool] = None
    is_baseline: Optional[bool] = None
    is_completed: Optional[bool] = None
    completed_on: Optional[int] = None


class AddSuite(Payload):
    name: str
    description: Optional[str] = None


class UpdateSuite(Payload):
    name: Optional[str] = None
    description: Optional[str] = None


class Section(Record):
    """A section (folder) inside a suite."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    depth: Optional[int] = None
    display_order: Optional[int] = None
    parent_id: Optional[int] = None
    suite_id: Optional[int] = None


class AddSection(Payload):
    name: str
    description: Optional[str] = None
    suite_id: Optional[int] = None
    parent_id: Optional[int] = None


class UpdateSection(Payload):
    name: Optional[str] = None
    description: Optional[str] = None


class MoveSection(Payload):
    parent_id: Optional[int] = None
    after_id: Optional[int] = None


class SectionFilters(Filters):
    suite_id: Optional[int] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
