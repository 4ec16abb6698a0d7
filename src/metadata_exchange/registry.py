"""Discriminator registry mapping ``class`` tags to property variants."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .exceptions import RegistryError, UnknownDiscriminatorError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DiscriminatorRegistry:
    """Closed vocabulary of type tags, organised by variant family.

    A family is a polymorphic base type. Each registered variant is a subclass of its
    family (or the family itself, for its own tag). A variant may itself be a family with
    further variants, and resolution walks down through those nested families.
    The registry is populated once and then frozen; lookups never take a lock.
    """

    _families: dict[type, dict[str, type]] = field(default_factory=dict)
    _tags: dict[type, str] = field(default_factory=dict)
    _owners: dict[str, type] = field(default_factory=dict)
    _frozen: bool = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, family: type, variant: type, tag: str) -> None:
        if self._frozen:
            msg = f"Cannot register {tag!r}: registry is frozen"
            raise RegistryError(msg)
        if not issubclass(variant, family):
            msg = f"{variant.__name__} is not a variant of {family.__name__}"
            raise RegistryError(msg)
        existing = self._owners.get(tag)
        if existing is not None and existing is not variant:
            msg = f"Tag {tag!r} already registered for {existing.__name__}"
            raise RegistryError(msg)
        current = self._tags.get(variant)
        if current is not None and current != tag:
            msg = f"{variant.__name__} already registered as {current!r}"
            raise RegistryError(msg)
        self._families.setdefault(family, {})[tag] = variant
        self._tags[variant] = tag
        self._owners[tag] = variant

    def freeze(self) -> None:
        """Reject any further registration."""

        self._frozen = True
        logger.debug(
            "Discriminator registry frozen with %d tags across %d families",
            len(self._owners),
            len(self._families),
        )

    def tag_for(self, variant: type) -> str | None:
        return self._tags.get(variant)

    def is_polymorphic(self, model_type: type) -> bool:
        return model_type in self._tags or model_type in self._families

    def resolve(self, family: type, tag: object) -> type:
        """Return the variant registered under ``tag`` anywhere below ``family``."""

        if not isinstance(tag, str):
            raise UnknownDiscriminatorError(tag, family.__name__)
        if self._tags.get(family) == tag:
            return family
        for candidate_tag, variant in self._walk(family, set()):
            if candidate_tag == tag:
                return variant
        raise UnknownDiscriminatorError(tag, family.__name__)

    def tags(self, family: type) -> frozenset[str]:
        """All tags reachable from ``family``, including its own."""

        found = {tag for tag, _ in self._walk(family, set())}
        own = self._tags.get(family)
        if own is not None:
            found.add(own)
        return frozenset(found)

    def _walk(self, family: type, seen: set[type]) -> Iterator[tuple[str, type]]:
        seen.add(family)
        variants = self._families.get(family, {})
        yield from variants.items()
        for variant in variants.values():
            if variant not in seen and variant in self._families:
                yield from self._walk(variant, seen)


registry = DiscriminatorRegistry()


def register_variant(family: type, variant: type, tag: str | None = None) -> None:
    """Register a variant on the global registry under ``tag`` (default: its class name)."""

    registry.register(family, variant, tag or variant.__name__)


__all__ = ["DiscriminatorRegistry", "register_variant", "registry"]
