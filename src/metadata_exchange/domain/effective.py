"""Effectivity window and extension bag shared by polymorphic property variants."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Self

from pydantic import ModelWrapValidatorHandler, PrivateAttr, model_validator

from metadata_exchange.utils.time import ensure_utc, utc_now

from .base import PolymorphicProperties, PropertiesModel
from .types import PropertyBag, Timestamp

EXTENDED_PROPERTIES_KEYS = ("extendedProperties", "extended_properties")


class EffectiveDatedProperties(PolymorphicProperties):
    """Adds a validity window and an overflow bag for properties without typed fields.

    ``effective_from`` unset means valid since the beginning of time; ``effective_to``
    unset means valid indefinitely. The bounds are not checked against each other.

    ``extended_properties`` always hands out an independent copy, and an empty bag
    reads (and is written to the wire) as absent. Bag values are stored untyped, so a
    ``datetime`` placed in the bag is written as an ISO string and decodes back as ``str``.
    """

    effective_from: Timestamp = None
    effective_to: Timestamp = None

    _extended_properties: PropertyBag | None = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _capture_extended_properties(
        cls, data: Any, handler: ModelWrapValidatorHandler[Self]
    ) -> Self:
        # Assignment validation and already-built instances arrive here without a mapping.
        if not isinstance(data, Mapping):
            return handler(data)
        keys = [key for key in EXTENDED_PROPERTIES_KEYS if key in data]
        if not keys:
            return handler(data)
        bag = data[keys[0]]
        if bag is not None and not isinstance(bag, Mapping):
            msg = "extendedProperties must be an object"
            raise ValueError(msg)
        instance = handler(data)
        instance.extended_properties = bag
        return instance

    @property
    def extended_properties(self) -> PropertyBag | None:
        if not self._extended_properties:
            return None
        return dict(self._extended_properties)

    @extended_properties.setter
    def extended_properties(self, value: Mapping[str, Any] | None) -> None:
        self._extended_properties = dict(value) if value else None

    def is_effective(self, at: datetime | None = None) -> bool:
        """Return whether ``at`` (default: now) falls inside ``[effective_from, effective_to)``."""

        moment = ensure_utc(at) if at is not None else utc_now()
        if self.effective_from is not None and moment < self.effective_from:
            return False
        if self.effective_to is not None and moment >= self.effective_to:
            return False
        return True

    def _copy_state_from(self, template: PropertiesModel) -> None:
        if isinstance(template, EffectiveDatedProperties):
            self.extended_properties = template.extended_properties

    def _wire_fields(self, data: dict[str, Any]) -> dict[str, Any]:
        data = super()._wire_fields(data)
        bag = self.extended_properties
        if bag:
            data["extendedProperties"] = bag
        return data


__all__ = ["EXTENDED_PROPERTIES_KEYS", "EffectiveDatedProperties"]
