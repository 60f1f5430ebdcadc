from __future__ import annotations

from typing import Optional

from ..models.base import PayloadLike, dump_filters, dump_payload, parse_record, parse_records
from ..models.datasets import Dataset, DatasetItem, DatasetItemFilters, Variable
from .base import Resource, unwrap


class DatasetsResource(Resource):
    """Datasets and dataset items for data-driven testing (Enterprise only)."""

    async def list(self, project_id: int) -> list[Dataset]:
        data = await self._transport.get(f"get_datasets/{project_id}")
        return parse_records(Dataset, unwrap(data, "datasets"))

    async def get(self, dataset_id: int) -> Dataset:
        data = await self._transport.get(f"get_dataset/{dataset_id}")
        return parse_record(Dataset, data)

    async def add(self, project_id: int, dataset: PayloadLike) -> Dataset:
        data = await self._transport.post(
            f"add_dataset/{project_id}", dump_payload(dataset)
        )
        return parse_record(Dataset, data)

    async def update(self, dataset_id: int, dataset: PayloadLike) -> Dataset:
        data = await self._transport.post(
            f"update_dataset/{dataset_id}", dump_payload(dataset)
        )
        return parse_record(Dataset, data)

    async def delete(self, dataset_id: int) -> None:
        await self._transport.post(f"delete_dataset/{dataset_id}")

    async def list_items(
        self, filters: Optional[DatasetItemFilters] = None
    ) -> list[DatasetItem]:
        data = await self._transport.get(
            "get_dataset_items", params=dump_filters(filters)
        )
        return parse_records(DatasetItem, unwrap(data, "dataset_items"))

    async def add_item(self, item: PayloadLike) -> DatasetItem:
        data = await self._transport.post("add_dataset_item", dump_payload(item))
        return parse_record(DatasetItem, data)

    async def update_item(self, item_id: int, item: PayloadLike) -> DatasetItem:
        data = await self._transport.post(
            f"update_dataset_item/{item_id}", dump_payload(item)
        )
        return parse_record(DatasetItem, data)

    async def delete_item(self, item_id: int) -> None:
        await self._transport.post(f"delete_dataset_item/{item_id}")


class VariablesResource(Resource):
    """Dataset variables of a project (Enterprise only)."""

    async def list(self, project_id: int) -> list[Variable]:
        data = await self._transport.get(f"get_variables/{project_id}")
        return parse_records(Variable, unwrap(data, "variables"))

    async def add(self, project_id: int, variable: PayloadLike) -> Variable:
        data = await self._transport.post(
            f"add_variable/{project_id}", dump_payload(variable)
        )
        return parse_record(Variable, data)

    async def update(self, variable_id: int, variable: PayloadLike) -> Variable:
        data = await self._transport.post(
            f"update_variable/{variable_id}", dump_payload(variable)
        )
        return parse_record(Variable, data)

    async def delete(self, variable_id: int) -> None:
        await self._transport.post(f"delete_variable/{variable_id}")
