"""Lightweight configuration loader for the property codec."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import tzinfo
from functools import lru_cache

from metadata_exchange.utils.time import resolve_zone


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", ""}


@dataclass(frozen=True)
class ExchangeSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    timezone: str = "UTC"
    log_ignored_properties: bool = False

    @classmethod
    def from_env(cls) -> ExchangeSettings:
        return cls(
            environment=os.getenv("EXCHANGE_ENV", cls.environment),
            timezone=os.getenv("EXCHANGE_TIMEZONE", cls.timezone),
            log_ignored_properties=_env_bool(
                "EXCHANGE_LOG_IGNORED_PROPERTIES", cls.log_ignored_properties
            ),
        )

    @property
    def zone(self) -> tzinfo:
        """Zone assumed for naive timestamps found on the wire."""

        return resolve_zone(self.timezone)


@lru_cache(maxsize=1)
def default_settings() -> ExchangeSettings:
    """Settings read once from the environment and reused by the codec."""

    return ExchangeSettings.from_env()


__all__ = ["ExchangeSettings", "default_settings"]
