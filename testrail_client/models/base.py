"""Base classes for TestRail records, request payloads and list filters."""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import APIError

R = TypeVar("R", bound="Record")


class Record(BaseModel):
    """
    Snapshot of a server-side entity.

    Records mirror TestRail's JSON and validate nothing beyond field types.
    Validation is strict so values are never coerced, and fields the model
    does not declare (custom case fields, attributes added by newer TestRail
    releases) are kept as extras, so ``model_dump(exclude_unset=True)``
    reproduces what the server sent.
    """

    model_config = ConfigDict(extra="allow", strict=True)


class Payload(BaseModel):
    """
    Request body for an add/update endpoint.

    Only fields that were explicitly set are sent, which keeps partial
    updates partial. Extra fields are allowed for ``custom_*`` values.
    """

    model_config = ConfigDict(extra="allow")


class Filters(BaseModel):
    """Query filters for a list endpoint; unset fields are not sent."""

    model_config = ConfigDict(extra="forbid")


PayloadLike = Union[Payload, Mapping[str, Any]]


def dump_payload(payload: Optional[PayloadLike]) -> Optional[dict[str, Any]]:
    """Accept a Payload model or a plain mapping and return a JSON body."""
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return dict(payload)


def dump_filters(filters: Optional[Union[Filters, Mapping[str, Any]]]) -> dict[str, Any]:
    if filters is None:
        return {}
    if isinstance(filters, BaseModel):
        return filters.model_dump(exclude_none=True)
    return dict(filters)


def parse_record(model: type[R], data: Any) -> R:
    """
    Validate a successful response body as ``model``.

    A body that does not fit the model is reported as an ``APIError`` with
    status 200, like any other malformed success response.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise APIError(
            f"Unexpected response for {model.__name__}: {exc.error_count()} invalid field(s)",
            status_code=200,
            body=data,
        ) from exc


def parse_records(model: type[R], items: Any) -> list[R]:
    return [parse_record(model, item) for item in items or []]
