"""Referenceable element properties, including external references."""

from __future__ import annotations

from .effective import EffectiveDatedProperties
from .enums import MediaType, MediaUsage
from .types import StringMap, Timestamp

_REFERENCEABLE_REPR = (
    "qualified_name",
    "additional_properties",
    "effective_from",
    "effective_to",
    "type_name",
    "extended_properties",
)

_EXTERNAL_REFERENCE_FIELDS = (
    "reference_title",
    "reference_abstract",
    "authors",
    "reference_version",
    "number_of_pages",
    "page_range",
    "publication_series",
    "publication_series_volume",
    "edition",
    "url",
    "publisher",
    "first_publication_date",
    "publication_date",
    "publication_city",
    "publication_year",
    "publication_numbers",
    "license",
    "copyright",
    "attribution",
)


class ReferenceableProperties(EffectiveDatedProperties):
    """Properties of an element that has a unique qualified name.

    Unlike classifications, equality here includes the extension bag.
    """

    qualified_name: str | None = None
    additional_properties: StringMap | None = None
    type_name: str | None = None

    equality_fields = (
        "qualified_name",
        "additional_properties",
        "effective_from",
        "effective_to",
        "type_name",
        "extended_properties",
    )
    repr_fields = _REFERENCEABLE_REPR


class ExternalReferenceProperties(ReferenceableProperties):
    """A link to material held outside the catalog, such as a paper or web page."""

    reference_title: str | None = None
    reference_abstract: str | None = None
    authors: list[str] | None = None
    reference_version: str | None = None
    number_of_pages: int | None = None
    page_range: str | None = None
    publication_series: str | None = None
    publication_series_volume: str | None = None
    edition: str | None = None
    url: str | None = None
    publisher: str | None = None
    first_publication_date: Timestamp = None
    publication_date: Timestamp = None
    publication_city: str | None = None
    publication_year: str | None = None
    publication_numbers: list[str] | None = None
    license: str | None = None
    copyright: str | None = None
    attribution: str | None = None

    equality_fields = (*ReferenceableProperties.equality_fields, *_EXTERNAL_REFERENCE_FIELDS)
    repr_fields = (*_EXTERNAL_REFERENCE_FIELDS, *_REFERENCEABLE_REPR)


class RelatedMediaProperties(ExternalReferenceProperties):
    """External reference to an image, recording or other media."""

    media_type: MediaType | None = None
    media_type_other_id: str | None = None
    default_media_usage: MediaUsage | None = None
    default_media_usage_other_id: str | None = None

    equality_fields = (
        *ExternalReferenceProperties.equality_fields,
        "media_type",
        "media_type_other_id",
        "default_media_usage",
        "default_media_usage_other_id",
    )
    repr_fields = (
        "media_type",
        "media_type_other_id",
        "default_media_usage",
        "default_media_usage_other_id",
        *ExternalReferenceProperties.repr_fields,
    )


__all__ = ["ExternalReferenceProperties", "ReferenceableProperties", "RelatedMediaProperties"]
