from __future__ import annotations

from ..models.base import PayloadLike, dump_payload, parse_record, parse_records
from ..models.configurations import Config, ConfigGroup
from .base import Resource, unwrap


class ConfigurationsResource(Resource):
    """Configuration groups (e.g. "Browsers") and the configurations inside them."""

    async def list(self, project_id: int) -> list[ConfigGroup]:
        data = await self._transport.get(f"get_configs/{project_id}")
        return parse_records(ConfigGroup, unwrap(data, "configs"))

    async def add_group(self, project_id: int, group: PayloadLike) -> ConfigGroup:
        data = await self._transport.post(
            f"add_config_group/{project_id}", dump_payload(group)
        )
        return parse_record(ConfigGroup, data)

    async def add(self, config_group_id: int, config: PayloadLike) -> Config:
        data = await self._transport.post(
            f"add_config/{config_group_id}", dump_payload(config)
        )
        return parse_record(Config, data)

    async def update_group(
        self, config_group_id: int, group: PayloadLike
    ) -> ConfigGroup:
        data = await self._transport.post(
            f"update_config_group/{config_group_id}", dump_payload(group)
        )
        return parse_record(ConfigGroup, data)

    async def update(self, config_id: int, config: PayloadLike) -> Config:
        data = await self._transport.post(
            f"update_config/{config_id}", dump_payload(config)
        )
        return parse_record(Config, data)

    async def delete_group(self, config_group_id: int) -> None:
        await self._transport.post(f"delete_config_group/{config_group_id}")

    async def delete(self, config_id: int) -> None:
        await self._transport.post(f"delete_config/{config_id}")
