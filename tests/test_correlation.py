from __future__ import annotations

from datetime import datetime

import pytest

from metadata_exchange import decode, encode
from metadata_exchange.domain import (
    ExternalReferenceProperties,
    ExternalReferenceRequestBody,
    KeyPattern,
    MediaType,
    MetadataCorrelationProperties,
    RelatedMediaProperties,
    SynchronizationDirection,
    UpdateRequestBody,
)
from metadata_exchange.exceptions import UnknownDiscriminatorError


def _correlation() -> MetadataCorrelationProperties:
    return MetadataCorrelationProperties(
        asset_manager_guid="am-1",
        asset_manager_name="Lake Catalog",
        external_identifier="tbl-42",
        key_pattern=KeyPattern.LOCAL_KEY,
        mapping_properties={"schema": "sales"},
        synchronization_direction=SynchronizationDirection.FROM_THIRD_PARTY,
    )


def _request(jan_first: datetime) -> ExternalReferenceRequestBody:
    return ExternalReferenceRequestBody(
        element_properties=RelatedMediaProperties(
            qualified_name="media::logo",
            media_type=MediaType.IMAGE,
            authors=["design team"],
        ),
        anchor_guid="anchor-1",
        metadata_correlation_properties=_correlation(),
        effective_time=jan_first,
    )


def test_request_round_trip_keeps_nested_variant(jan_first: datetime) -> None:
    request = _request(jan_first)

    encoded = encode(request)
    decoded = decode(encoded, ExternalReferenceRequestBody)

    assert "class" not in encoded
    assert encoded["elementProperties"]["class"] == "RelatedMediaProperties"
    assert encoded["elementProperties"]["mediaType"] == "IMAGE"
    assert encoded["metadataCorrelationProperties"]["keyPattern"] == "LOCAL_KEY"
    assert encoded["anchorGUID"] == "anchor-1"
    assert type(decoded.element_properties) is RelatedMediaProperties
    assert decoded == request


def test_absent_anchor_is_omitted_and_decodes_as_none() -> None:
    request = ExternalReferenceRequestBody(
        element_properties=ExternalReferenceProperties(qualified_name="ref::1")
    )

    encoded = encode(request)
    decoded = decode(encoded, ExternalReferenceRequestBody)

    assert "anchorGUID" not in encoded
    assert decoded.anchor_guid is None
    assert decoded == request


def test_unknown_nested_discriminator_is_rejected() -> None:
    payload = {"elementProperties": {"class": "OwnerProperties", "owner": "jo"}, "anchorGUID": "a"}

    with pytest.raises(UnknownDiscriminatorError):
        decode(payload, ExternalReferenceRequestBody)


def test_assigning_a_payload_mapping_resolves_the_variant() -> None:
    request = ExternalReferenceRequestBody()

    request.element_properties = {"class": "RelatedMediaProperties", "mediaType": "VIDEO"}

    assert isinstance(request.element_properties, RelatedMediaProperties)
    assert request.element_properties.media_type is MediaType.VIDEO


def test_copy_shares_nested_objects(jan_first: datetime) -> None:
    request = _request(jan_first)

    copied = ExternalReferenceRequestBody.from_template(request)

    assert copied == request
    assert copied is not request
    assert copied.element_properties is request.element_properties
    assert copied.metadata_correlation_properties is request.metadata_correlation_properties


def test_copy_from_none_is_default() -> None:
    assert ExternalReferenceRequestBody.from_template(None) == ExternalReferenceRequestBody()


def test_equality_includes_inherited_request_fields(jan_first: datetime) -> None:
    left = _request(jan_first)
    right = _request(jan_first)
    assert left == right
    assert hash(left) == hash(right)

    right.metadata_correlation_properties = MetadataCorrelationProperties(asset_manager_guid="am-2")
    assert left != right

    right = _request(jan_first)
    right.anchor_guid = "anchor-2"
    assert left != right


def test_envelope_equality_sees_payload_extension_bag(jan_first: datetime) -> None:
    left = _request(jan_first)
    right = _request(jan_first)

    bagged = RelatedMediaProperties.from_template(right.element_properties)
    bagged.extended_properties = {"licence": "cc-by"}
    right.element_properties = bagged

    assert left != right


def test_request_body_types_are_distinct(jan_first: datetime) -> None:
    base = UpdateRequestBody(metadata_correlation_properties=_correlation(), effective_time=jan_first)
    derived = ExternalReferenceRequestBody(
        metadata_correlation_properties=_correlation(), effective_time=jan_first
    )

    assert base != derived


def test_repr_lists_payload_first(jan_first: datetime) -> None:
    text = repr(ExternalReferenceRequestBody(anchor_guid="a", effective_time=jan_first))

    assert text.startswith("ExternalReferenceRequestBody(element_properties=None, anchor_guid='a', ")
    assert text.index("metadata_correlation_properties") < text.index("effective_time")
