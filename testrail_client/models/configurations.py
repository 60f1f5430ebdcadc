from typing import Optional

from .base import Payload, Record


class Config(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    group_id: Optional[int] = None


class ConfigGroup(Record):
    """A configuration group (e.g. "Browsers") with its configurations."""

    id: Optional[int] = None
    name: Optional[str] = None
    project_id: Optional[int] = None
    configs: Optional[list[Config]] = None


class ConfigName(Payload):
    """Body of every add/update configuration endpoint: just a name."""

    name: str
