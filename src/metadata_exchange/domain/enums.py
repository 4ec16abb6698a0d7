"""Enumerations used across the property model."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class GovernanceClassificationStatus(IntEnum):
    """Known values for the ``status`` of a governance classification."""

    UNKNOWN = 0
    DISCOVERED = 1
    PROPOSED = 2
    IMPORTED = 3
    VALIDATED = 4
    DEPRECATED = 5
    OBSOLETE = 6
    OTHER = 99


class ActivityType(IntEnum):
    """Kinds of activity a glossary term can describe."""

    OPERATION = 0
    ACTION = 1
    TASK = 2
    PROCESS = 3
    PROJECT = 4
    OTHER = 99


class KeyPattern(StrEnum):
    """How an external system allocates the identifiers it correlates."""

    LOCAL_KEY = "LOCAL_KEY"
    RECYCLED_KEY = "RECYCLED_KEY"
    NATURAL_KEY = "NATURAL_KEY"
    MIRROR_KEY = "MIRROR_KEY"
    AGGREGATE_KEY = "AGGREGATE_KEY"
    CALLERS_KEY = "CALLERS_KEY"
    STABLE_KEY = "STABLE_KEY"
    OTHER = "OTHER"


class SynchronizationDirection(StrEnum):
    """Direction in which correlated metadata flows."""

    BOTH_DIRECTIONS = "BOTH_DIRECTIONS"
    TO_THIRD_PARTY = "TO_THIRD_PARTY"
    FROM_THIRD_PARTY = "FROM_THIRD_PARTY"
    OTHER = "OTHER"


class MediaType(StrEnum):
    IMAGE = "IMAGE"
    AUDIO = "AUDIO"
    DOCUMENT = "DOCUMENT"
    VIDEO = "VIDEO"
    OTHER = "OTHER"


class MediaUsage(StrEnum):
    ICON = "ICON"
    THUMBNAIL = "THUMBNAIL"
    ILLUSTRATION = "ILLUSTRATION"
    USAGE_GUIDANCE = "USAGE_GUIDANCE"
    OTHER = "OTHER"
