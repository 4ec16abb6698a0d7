"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def ensure_utc(value: datetime, assume: tzinfo = UTC) -> datetime:
    """Normalize a datetime to UTC, treating naive values as ``assume``."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=assume)
    return value.astimezone(UTC)


def resolve_zone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def parse_timestamp(value: object, assume: tzinfo = UTC) -> datetime | None:
    """Convert a wire timestamp into an aware UTC datetime.

    Accepts ``datetime`` objects, ISO-8601 strings (a trailing ``Z`` is allowed) and
    integers holding epoch milliseconds. Anything else raises ``ValueError``.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        msg = f"Expected a timestamp, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, datetime):
        return ensure_utc(value, assume)
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            msg = f"Invalid timestamp {value!r}"
            raise ValueError(msg) from exc
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            msg = f"Invalid timestamp {value!r}"
            raise ValueError(msg) from exc
        return ensure_utc(parsed, assume)
    msg = f"Expected a timestamp, got {type(value).__name__}"
    raise ValueError(msg)


__all__ = ["ensure_utc", "parse_timestamp", "resolve_zone", "utc_now"]
