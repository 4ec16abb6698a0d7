from __future__ import annotations

import pytest

from metadata_exchange.domain import (
    ClassificationProperties,
    ExternalReferenceProperties,
    GovernanceClassificationBase,
    ReferenceableProperties,
    RelatedMediaProperties,
    RetentionClassificationProperties,
    TaxonomyProperties,
)
from metadata_exchange.exceptions import RegistryError, UnknownDiscriminatorError
from metadata_exchange.registry import DiscriminatorRegistry, registry


class Shape:
    pass


class Polygon(Shape):
    pass


class Square(Polygon):
    pass


class Circle(Shape):
    pass


def _shapes() -> DiscriminatorRegistry:
    shapes = DiscriminatorRegistry()
    shapes.register(Shape, Shape, "Shape")
    shapes.register(Shape, Polygon, "Polygon")
    shapes.register(Shape, Circle, "Circle")
    shapes.register(Polygon, Square, "Square")
    return shapes


def test_resolve_walks_nested_families() -> None:
    shapes = _shapes()

    assert shapes.resolve(Shape, "Circle") is Circle
    assert shapes.resolve(Shape, "Square") is Square
    assert shapes.resolve(Polygon, "Square") is Square
    assert shapes.resolve(Polygon, "Polygon") is Polygon
    assert shapes.resolve(Shape, "Shape") is Shape


def test_resolve_rejects_tags_outside_the_family() -> None:
    shapes = _shapes()

    with pytest.raises(UnknownDiscriminatorError) as excinfo:
        shapes.resolve(Polygon, "Circle")
    assert excinfo.value.tag == "Circle"
    assert excinfo.value.family == "Polygon"

    with pytest.raises(UnknownDiscriminatorError):
        shapes.resolve(Shape, "Triangle")


def test_resolve_rejects_missing_or_non_string_tag() -> None:
    shapes = _shapes()

    with pytest.raises(UnknownDiscriminatorError) as excinfo:
        shapes.resolve(Shape, None)
    assert "missing" in str(excinfo.value)

    with pytest.raises(UnknownDiscriminatorError):
        shapes.resolve(Shape, 42)


def test_register_after_freeze_fails() -> None:
    shapes = _shapes()
    shapes.freeze()

    assert shapes.is_frozen
    with pytest.raises(RegistryError):
        shapes.register(Shape, Circle, "Round")
    assert shapes.resolve(Shape, "Circle") is Circle


def test_register_rejects_conflicts() -> None:
    shapes = _shapes()

    with pytest.raises(RegistryError):
        shapes.register(Shape, Square, "Circle")
    with pytest.raises(RegistryError):
        shapes.register(Shape, Circle, "Disc")
    with pytest.raises(RegistryError):
        shapes.register(Polygon, Circle, "Other")


def test_tags_include_nested_variants() -> None:
    shapes = _shapes()

    assert shapes.tags(Shape) == {"Shape", "Polygon", "Circle", "Square"}
    assert shapes.tags(Polygon) == {"Polygon", "Square"}
    assert shapes.tags(Circle) == {"Circle"}


def test_global_registry_is_frozen_with_builtin_vocabulary() -> None:
    assert registry.is_frozen
    assert registry.tags(ClassificationProperties) == {
        "ClassificationProperties",
        "ActivityDescriptionProperties",
        "AssetOriginProperties",
        "CanonicalVocabularyProperties",
        "DataFieldValuesProperties",
        "EditingGlossaryProperties",
        "GlossaryTermContextDefinition",
        "GovernanceClassificationBase",
        "GovernanceClassificationProperties",
        "OwnerProperties",
        "RetentionClassificationProperties",
        "SecurityTagsProperties",
        "StagingGlossaryProperties",
        "SubjectAreaMemberProperties",
        "TaxonomyProperties",
    }
    assert registry.tags(ReferenceableProperties) == {
        "ReferenceableProperties",
        "ExternalReferenceProperties",
        "RelatedMediaProperties",
    }


def test_global_registry_multi_level_dispatch() -> None:
    assert (
        registry.resolve(ClassificationProperties, "RetentionClassificationProperties")
        is RetentionClassificationProperties
    )
    assert registry.resolve(ReferenceableProperties, "RelatedMediaProperties") is RelatedMediaProperties
    assert registry.resolve(ExternalReferenceProperties, "RelatedMediaProperties") is RelatedMediaProperties
    with pytest.raises(UnknownDiscriminatorError):
        registry.resolve(GovernanceClassificationBase, "TaxonomyProperties")
    assert registry.tag_for(TaxonomyProperties) == "TaxonomyProperties"
    assert registry.is_polymorphic(GovernanceClassificationBase)
