"""Correlation metadata and the request bodies that carry it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, SerializeAsAny, ValidationInfo, field_validator

from .base import PropertiesModel
from .enums import KeyPattern, SynchronizationDirection
from .referenceable import ExternalReferenceProperties
from .types import Guid, StringMap, Timestamp

_CORRELATION_FIELDS = (
    "asset_manager_guid",
    "asset_manager_name",
    "external_identifier",
    "external_identifier_name",
    "external_identifier_usage",
    "external_identifier_source",
    "key_pattern",
    "mapping_properties",
    "synchronization_direction",
    "synchronization_description",
)


class MetadataCorrelationProperties(PropertiesModel):
    """Links an element to its counterpart in an external asset manager."""

    asset_manager_guid: Guid | None = Field(default=None, alias="assetManagerGUID")
    asset_manager_name: str | None = None
    external_identifier: str | None = None
    external_identifier_name: str | None = None
    external_identifier_usage: str | None = None
    external_identifier_source: str | None = None
    key_pattern: KeyPattern | None = None
    mapping_properties: StringMap | None = None
    synchronization_direction: SynchronizationDirection | None = None
    synchronization_description: str | None = None

    equality_fields = _CORRELATION_FIELDS
    repr_fields = _CORRELATION_FIELDS


class UpdateRequestBody(PropertiesModel):
    """Request body carrying correlation metadata and the effective time of the request."""

    metadata_correlation_properties: MetadataCorrelationProperties | None = None
    effective_time: Timestamp = None

    equality_fields = ("metadata_correlation_properties", "effective_time")
    repr_fields = ("metadata_correlation_properties", "effective_time")


class ExternalReferenceRequestBody(UpdateRequestBody):
    """Request body used to create or update an external reference.

    ``anchor_guid`` optionally names an existing element the new external reference
    should be linked to.
    """

    element_properties: SerializeAsAny[ExternalReferenceProperties] | None = None
    anchor_guid: Guid | None = Field(default=None, alias="anchorGUID")

    equality_fields = (*UpdateRequestBody.equality_fields, "element_properties", "anchor_guid")
    repr_fields = (
        "element_properties",
        "anchor_guid",
        "metadata_correlation_properties",
        "effective_time",
    )

    @field_validator("element_properties", mode="before")
    @classmethod
    def resolve_element_variant(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, Mapping):
            return ExternalReferenceProperties.from_wire(value, context=info.context)
        return value


__all__ = [
    "ExternalReferenceRequestBody",
    "MetadataCorrelationProperties",
    "UpdateRequestBody",
]
