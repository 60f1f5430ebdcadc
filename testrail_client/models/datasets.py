from typing import Optional

from .base import Filters, Payload, Record


class DatasetVariable(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    value: Optional[str] = None


class Dataset(Record):
    """A dataset for data-driven testing (TestRail Enterprise)."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    variables: Optional[list[DatasetVariable]] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    updated_on: Optional[int] = None
    updated_by: Optional[int] = None


class AddDataset(Payload):
    name: str
    description: Optional[str] = None
    variables: Optional[list[DatasetVariable]] = None


class UpdateDataset(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    variables: Optional[list[DatasetVariable]] = None


class DatasetItem(Record):
    id: Optional[int] = None
    dataset_id: Optional[int] = None
    name: Optional[str] = None
    value: Optional[str] = None
    created_on: Optional[int] = None
    created_by: Optional[int] = None
    updated_on: Optional[int] = None
    updated_by: Optional[int] = None


class AddDatasetItem(Payload):
    dataset_id: int
    name: str
    value: str


class UpdateDatasetItem(Payload):
    name: Optional[str] = None
    value: Optional[str] = None


class DatasetItemFilters(Filters):
    dataset_id: Optional[int] = None
    name: Optional[str] = None


class Variable(Record):
    id: Optional[int] = None
    name: Optional[str] = None


class VariableName(Payload):
    name: str
