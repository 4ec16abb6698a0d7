"""Exceptions raised by the property model and its codec."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class PropertiesError(RuntimeError):
    """Base class for property model failures."""


class DeserializationError(PropertiesError):
    """Raised when a wire payload cannot be turned into a property object."""


class UnknownDiscriminatorError(DeserializationError):
    """Raised when the ``class`` tag of a payload is not registered for the expected family."""

    def __init__(self, tag: object, family: str) -> None:
        self.tag = tag
        self.family = family
        if tag is None:
            msg = f"Payload for {family} is missing its 'class' discriminator"
        else:
            msg = f"Unknown discriminator {tag!r} for {family}"
        super().__init__(msg)


class MalformedValueError(DeserializationError):
    """Raised when a wire value cannot be converted to its declared type."""

    def __init__(self, message: str, errors: Sequence[Any] = ()) -> None:
        self.errors = tuple(errors)
        super().__init__(message)


class SerializationError(PropertiesError):
    """Raised when a property object cannot be written to the wire."""


class RegistryError(PropertiesError):
    """Raised when the discriminator registry is misused."""


__all__ = [
    "DeserializationError",
    "MalformedValueError",
    "PropertiesError",
    "RegistryError",
    "SerializationError",
    "UnknownDiscriminatorError",
]
