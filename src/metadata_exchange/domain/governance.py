"""Governance classification variants."""

from __future__ import annotations

from pydantic import Field

from .classification import ClassificationProperties
from .types import Guid, PrimitiveInt, Timestamp

_GOVERNANCE_REPR = (
    "status",
    "confidence",
    "steward",
    "steward_type_name",
    "steward_property_name",
    "source",
    "notes",
    "effective_from",
    "effective_to",
    "extended_properties",
)


class GovernanceClassificationBase(ClassificationProperties):
    """Common properties of the governance action classifications.

    ``status`` holds a ``GovernanceClassificationStatus`` value and ``confidence`` is
    expected in 0-100; neither is range-checked here. ``steward_type_name`` and
    ``steward_property_name`` say how to interpret ``steward``.
    """

    status: PrimitiveInt = 0
    confidence: PrimitiveInt = 0
    steward: str | None = None
    steward_type_name: str | None = None
    steward_property_name: str | None = None
    source: str | None = None
    notes: str | None = None

    equality_fields = (
        *ClassificationProperties.equality_fields,
        "status",
        "confidence",
        "steward",
        "steward_type_name",
        "steward_property_name",
        "source",
        "notes",
    )
    repr_fields = _GOVERNANCE_REPR


class GovernanceClassificationProperties(GovernanceClassificationBase):
    """General governance classification with a level such as criticality or impact."""

    level_identifier: PrimitiveInt = 0

    equality_fields = (*GovernanceClassificationBase.equality_fields, "level_identifier")
    repr_fields = ("level_identifier", *_GOVERNANCE_REPR)


class RetentionClassificationProperties(GovernanceClassificationBase):
    """Retention requirements: when to archive and when to delete."""

    associated_guid: Guid | None = Field(default=None, alias="associatedGUID")
    archive_after: Timestamp = None
    delete_after: Timestamp = None

    equality_fields = (
        *GovernanceClassificationBase.equality_fields,
        "associated_guid",
        "archive_after",
        "delete_after",
    )
    repr_fields = ("associated_guid", "archive_after", "delete_after", *_GOVERNANCE_REPR)


__all__ = [
    "GovernanceClassificationBase",
    "GovernanceClassificationProperties",
    "RetentionClassificationProperties",
]
