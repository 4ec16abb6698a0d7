"""Shared type aliases for the property model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, ValidationInfo

from metadata_exchange.utils.time import parse_timestamp

Guid = str
PropertyBag = dict[str, Any]
StringMap = dict[str, str]


def coerce_timestamp(value: object, info: ValidationInfo) -> datetime | None:
    zone = (info.context or {}).get("zone", UTC)
    return parse_timestamp(value, zone)


def null_as_zero(value: object) -> object:
    # Integer properties are primitives on the wire, so null reads as 0.
    if isinstance(value, bool):
        msg = f"Expected an integer, got {value!r}"
        raise ValueError(msg)
    return 0 if value is None else value


Timestamp = Annotated[datetime | None, BeforeValidator(coerce_timestamp)]
PrimitiveInt = Annotated[int, BeforeValidator(null_as_zero)]

__all__ = [
    "Guid",
    "PrimitiveInt",
    "PropertyBag",
    "StringMap",
    "Timestamp",
    "coerce_timestamp",
    "null_as_zero",
]
