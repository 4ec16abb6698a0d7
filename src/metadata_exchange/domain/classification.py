"""Classification property variants."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .effective import EffectiveDatedProperties
from .types import Guid, PrimitiveInt, StringMap

_EFFECTIVITY_REPR = ("effective_from", "effective_to", "extended_properties")


class ClassificationProperties(EffectiveDatedProperties):
    """Base shape for classifications: an effectivity window plus the extension bag.

    The bag is not part of equality for any classification.
    """

    equality_fields = ("effective_from", "effective_to")
    repr_fields = _EFFECTIVITY_REPR


class ActivityDescriptionProperties(ClassificationProperties):
    """Marks a glossary term as describing an activity."""

    activity_type: PrimitiveInt = 0

    equality_fields = (*ClassificationProperties.equality_fields, "activity_type")
    repr_fields = ("activity_type", *_EFFECTIVITY_REPR)


class AssetOriginProperties(ClassificationProperties):
    """Records the organization and business capability an asset came from."""

    organization_guid: Guid | None = Field(default=None, alias="organizationGUID")
    organization_property_name: str | None = None
    business_capability_guid: Guid | None = Field(default=None, alias="businessCapabilityGUID")
    business_capability_property_name: str | None = None
    other_origin_values: StringMap | None = None

    equality_fields = (
        *ClassificationProperties.equality_fields,
        "organization_guid",
        "organization_property_name",
        "business_capability_guid",
        "business_capability_property_name",
        "other_origin_values",
    )
    repr_fields = (
        "organization_guid",
        "organization_property_name",
        "business_capability_guid",
        "business_capability_property_name",
        "other_origin_values",
        *_EFFECTIVITY_REPR,
    )


class CanonicalVocabularyProperties(ClassificationProperties):
    scope: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "scope")
    repr_fields = ("scope", *_EFFECTIVITY_REPR)


class DataFieldValuesProperties(ClassificationProperties):
    """Describes the values a data field is expected to hold."""

    default_value: str | None = None
    sample_values: list[str] | None = None
    data_pattern: list[str] | None = None
    name_pattern: list[str] | None = None

    equality_fields = (
        *ClassificationProperties.equality_fields,
        "default_value",
        "sample_values",
        "data_pattern",
        "name_pattern",
    )
    repr_fields = (
        "default_value",
        "sample_values",
        "data_pattern",
        "name_pattern",
        *_EFFECTIVITY_REPR,
    )


class EditingGlossaryProperties(ClassificationProperties):
    description: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "description")
    repr_fields = ("description", *_EFFECTIVITY_REPR)


class GlossaryTermContextDefinition(ClassificationProperties):
    """Context in which a glossary term applies."""

    description: str | None = None
    scope: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "description", "scope")
    repr_fields = ("description", "scope", *_EFFECTIVITY_REPR)


class OwnerProperties(ClassificationProperties):
    """Identifies the owner of an element and how to interpret that identifier."""

    owner: str | None = None
    owner_type_name: str | None = None
    owner_property_name: str | None = None

    equality_fields = (
        *ClassificationProperties.equality_fields,
        "owner",
        "owner_type_name",
        "owner_property_name",
    )
    repr_fields = ("owner", "owner_type_name", "owner_property_name", *_EFFECTIVITY_REPR)


class SecurityTagsProperties(ClassificationProperties):
    """Security labels and access groups attached to an element."""

    security_labels: list[str] | None = None
    security_properties: dict[str, Any] | None = None
    access_groups: dict[str, list[str]] | None = None

    equality_fields = (
        *ClassificationProperties.equality_fields,
        "security_labels",
        "security_properties",
        "access_groups",
    )
    repr_fields = ("security_labels", "security_properties", "access_groups", *_EFFECTIVITY_REPR)


class StagingGlossaryProperties(ClassificationProperties):
    description: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "description")
    repr_fields = ("description", *_EFFECTIVITY_REPR)


class SubjectAreaMemberProperties(ClassificationProperties):
    subject_area_name: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "subject_area_name")
    repr_fields = ("subject_area_name", *_EFFECTIVITY_REPR)


class TaxonomyProperties(ClassificationProperties):
    organizing_principle: str | None = None

    equality_fields = (*ClassificationProperties.equality_fields, "organizing_principle")
    repr_fields = ("organizing_principle", *_EFFECTIVITY_REPR)


__all__ = [
    "ActivityDescriptionProperties",
    "AssetOriginProperties",
    "CanonicalVocabularyProperties",
    "ClassificationProperties",
    "DataFieldValuesProperties",
    "EditingGlossaryProperties",
    "GlossaryTermContextDefinition",
    "OwnerProperties",
    "SecurityTagsProperties",
    "StagingGlossaryProperties",
    "SubjectAreaMemberProperties",
    "TaxonomyProperties",
]
