"""Encoding and decoding of property objects to and from their wire form."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from metadata_exchange.config import ExchangeSettings, default_settings
from metadata_exchange.domain import ClassificationProperties, PolymorphicProperties, PropertiesModel
from metadata_exchange.domain.effective import EXTENDED_PROPERTIES_KEYS
from metadata_exchange.exceptions import (
    DeserializationError,
    MalformedValueError,
    SerializationError,
)
from metadata_exchange.registry import registry

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=PropertiesModel)


def encode(model: PropertiesModel) -> dict[str, Any]:
    """Return the wire mapping for ``model``.

    Polymorphic types lead with their ``class`` tag. Unset values are omitted and an
    empty extension bag is left out entirely.
    """

    if isinstance(model, PolymorphicProperties) and registry.tag_for(type(model)) is None:
        msg = f"{type(model).__name__} has no registered discriminator"
        raise SerializationError(msg)
    try:
        return model.model_dump(mode="json")
    except PydanticSerializationError as exc:
        raise SerializationError(str(exc)) from exc


def encode_json(model: PropertiesModel, *, indent: int | None = None) -> str:
    return json.dumps(encode(model), indent=indent)


def decode(
    payload: Mapping[str, Any],
    expected: type[ModelT] = ClassificationProperties,  # type: ignore[assignment]
    *,
    settings: ExchangeSettings | None = None,
) -> ModelT:
    """Build the concrete property object described by ``payload``.

    For polymorphic ``expected`` types the ``class`` tag picks the variant from the
    family below ``expected``; unknown tags raise ``UnknownDiscriminatorError``.
    Other types are validated directly. Unknown keys are ignored.
    """

    resolved = settings or default_settings()
    if not isinstance(payload, Mapping):
        msg = f"Expected an object for {expected.__name__}, got {type(payload).__name__}"
        raise MalformedValueError(msg)
    context = {"zone": resolved.zone}
    try:
        if issubclass(expected, PolymorphicProperties):
            result = expected.from_wire(payload, context=context)
        else:
            result = _validate(expected, payload, context)
    except DeserializationError as exc:
        logger.debug(
            "Failed to decode %s payload (class=%r): %s",
            expected.__name__,
            payload.get("class"),
            exc,
        )
        raise
    if resolved.log_ignored_properties:
        _log_ignored(result, payload)
    return result


def decode_json(
    text: str | bytes,
    expected: type[ModelT] = ClassificationProperties,  # type: ignore[assignment]
    *,
    settings: ExchangeSettings | None = None,
) -> ModelT:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON for {expected.__name__}: {exc.msg}"
        raise MalformedValueError(msg) from exc
    return decode(payload, expected, settings=settings)


def _validate(expected: type[ModelT], payload: Mapping[str, Any], context: dict[str, Any]) -> ModelT:
    try:
        return expected.model_validate(payload, context=context)
    except ValidationError as exc:
        msg = f"Invalid {expected.__name__} payload: {exc.error_count()} error(s)"
        raise MalformedValueError(msg, exc.errors()) from exc


def _log_ignored(model: PropertiesModel, payload: Mapping[str, Any]) -> None:
    known = {"class", *EXTENDED_PROPERTIES_KEYS}
    for name, field in type(model).model_fields.items():
        known.add(name)
        if field.alias:
            known.add(field.alias)
    ignored = sorted(key for key in payload if key not in known)
    if ignored:
        logger.debug("Ignored unknown properties for %s: %s", type(model).__name__, ignored)


__all__ = ["decode", "decode_json", "encode", "encode_json"]
