"""Core base classes for property models."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from metadata_exchange.exceptions import MalformedValueError, SerializationError
from metadata_exchange.registry import registry


def freeze(value: Any) -> Any:
    """Return a hashable stand-in for nested mappings and sequences."""

    if isinstance(value, Mapping):
        return frozenset((key, freeze(item)) for key, item in value.items())
    if isinstance(value, set | frozenset):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value


def _copy_top_level(value: Any) -> Any:
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value


class PropertiesModel(BaseModel):
    """Mutable value object exchanged across the metadata boundary.

    Attributes are snake_case; the wire uses camelCase aliases. Unknown wire keys are
    ignored, and ``None`` values are never written out.

    Equality is type-exact and compares the names listed in ``equality_fields``; the
    hash covers the same names. ``repr_fields`` fixes the order of the field dump.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
        validate_assignment=True,
        extra="ignore",
    )

    equality_fields: ClassVar[tuple[str, ...]] = ()
    repr_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_template(cls, template: PropertiesModel | None = None) -> Self:
        """Copy constructor: collections are copied one level deep, objects are shared."""

        if template is None:
            return cls()
        template_fields = type(template).model_fields
        values = {
            name: _copy_top_level(getattr(template, name))
            for name in cls.model_fields
            if name in template_fields
        }
        instance = cls.model_construct(**values)
        instance._copy_state_from(template)
        return instance

    def _copy_state_from(self, template: PropertiesModel) -> None:
        """Copy state held outside the declared fields."""

    def _wire_fields(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = {key: value for key, value in handler(self).items() if value is not None}
        return self._wire_fields(data)

    def _equality_key(self) -> tuple[Any, ...]:
        return tuple(freeze(getattr(self, name)) for name in self.equality_fields)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash(self._equality_key())

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        names = self.repr_fields or tuple(type(self).model_fields)
        for name in names:
            yield name, getattr(self, name)


class PolymorphicProperties(PropertiesModel):
    """Property model whose concrete type travels with it as a ``class`` tag."""

    @classmethod
    def from_wire(
        cls,
        payload: Mapping[str, Any],
        *,
        context: Mapping[str, Any] | None = None,
    ) -> Self:
        """Resolve the ``class`` tag within this family and validate the payload."""

        variant = registry.resolve(cls, payload.get("class"))
        try:
            return variant.model_validate(payload, context=dict(context or {}))
        except ValidationError as exc:
            msg = f"Invalid {variant.__name__} payload: {exc.error_count()} error(s)"
            raise MalformedValueError(msg, exc.errors()) from exc

    def _wire_fields(self, data: dict[str, Any]) -> dict[str, Any]:
        tag = registry.tag_for(type(self))
        if tag is None:
            msg = f"{type(self).__name__} has no registered discriminator"
            raise SerializationError(msg)
        return {"class": tag, **data}


__all__ = ["PolymorphicProperties", "PropertiesModel", "freeze"]
