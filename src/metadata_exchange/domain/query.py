"""Query targets feeding a derived value."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from pydantic import Field

from .base import PropertiesModel
from .types import Guid

_DIGITS = re.compile(r"(\d+)")


class QueryTargetProperties(PropertiesModel):
    """One named sub-query used to compute a derived value.

    ``query_id`` orders the sub-queries: results of lower ids can be substituted into
    placeholders of queries with higher ids, or into the parent formula. Uniqueness of
    ``query_id`` is up to whoever owns the collection of targets.
    """

    query_id: str | None = None
    query: str | None = None
    query_target_guid: Guid | None = Field(default=None, alias="queryTargetGUID")

    equality_fields = ("query_id", "query", "query_target_guid")
    repr_fields = ("query_id", "query", "query_target_guid")


def _natural_key(query_id: str) -> tuple[tuple[int, int | str], ...]:
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part)
        for part in _DIGITS.split(query_id)
        if part
    )


def execution_order(targets: Iterable[QueryTargetProperties]) -> list[QueryTargetProperties]:
    """Sort targets by ``query_id`` (``Q2`` before ``Q10``); targets without an id go last."""

    return sorted(
        targets,
        key=lambda target: (
            target.query_id is None,
            _natural_key(target.query_id) if target.query_id is not None else (),
        ),
    )


def duplicate_query_ids(targets: Iterable[QueryTargetProperties]) -> set[str]:
    counts = Counter(target.query_id for target in targets if target.query_id is not None)
    return {query_id for query_id, count in counts.items() if count > 1}


__all__ = ["QueryTargetProperties", "duplicate_query_ids", "execution_order"]
