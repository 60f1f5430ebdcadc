"""Shared plumbing for the per-area resource clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..exceptions import APIError
from ..models.base import Filters, dump_filters
from ..transport import Transport

DEFAULT_LIMIT = 250
PAGINATION_KEYS = frozenset({"offset", "limit", "size", "_links"})


class Resource:
    """Base for resource clients; holds the shared transport and nothing else."""

    def __init__(self, transport: Transport):
        self._transport = transport


def unwrap(data: Any, key: str) -> list[Any]:
    """
    Return the record list from a list response.

    TestRail 6.7+ wraps lists in a paginated envelope
    (``{"offset": 0, "limit": 250, "size": 2, "_links": {...}, key: [...]}``)
    while older releases return the bare array. Both are accepted and the
    pagination metadata is dropped. An envelope without ``key`` is an empty
    page only if it carries pagination metadata; any other object (such as
    ``{"error": ...}``) is a malformed response.
    """
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get(key)
        if isinstance(items, list):
            return items
        if items is None and (key in data or PAGINATION_KEYS & data.keys()):
            return []
    raise APIError(
        f"Unexpected response for {key}: expected a list or an envelope",
        status_code=200,
        body=data,
    )


def page_params(
    offset: int,
    limit: int,
    filters: Optional[Union[Filters, Mapping[str, Any]]] = None,
) -> dict[str, Any]:
    """Merge pagination and filters into one query mapping; filters win."""
    params: dict[str, Any] = {"offset": offset, "limit": limit}
    params.update(dump_filters(filters))
    return params


def flag(value: bool) -> int:
    """TestRail expects 0/1 rather than JSON booleans in delete bodies."""
    return 1 if value else 0
