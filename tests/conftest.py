from __future__ import annotations

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an editable install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from metadata_exchange.config import ExchangeSettings, default_settings  # noqa: E402


@pytest.fixture
def jan_first() -> datetime:
    return datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def settings() -> ExchangeSettings:
    return ExchangeSettings(environment="test", timezone="UTC")


@pytest.fixture(autouse=True)
def _reset_default_settings():
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()
