"""Shared helpers."""

from .time import ensure_utc, parse_timestamp, resolve_zone, utc_now

__all__ = ["ensure_utc", "parse_timestamp", "resolve_zone", "utc_now"]
