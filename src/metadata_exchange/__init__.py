"""Polymorphic, effective-dated metadata property model and its wire codec."""

from .codec import decode, decode_json, encode, encode_json
from .config import ExchangeSettings
from .exceptions import (
    DeserializationError,
    MalformedValueError,
    PropertiesError,
    RegistryError,
    SerializationError,
    UnknownDiscriminatorError,
)
from .registry import DiscriminatorRegistry, registry

__all__ = [
    "DeserializationError",
    "DiscriminatorRegistry",
    "ExchangeSettings",
    "MalformedValueError",
    "PropertiesError",
    "RegistryError",
    "SerializationError",
    "UnknownDiscriminatorError",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "registry",
]
