from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from period.config.settings import reset_settings

REFERENCE = datetime(2026, 2, 22, 14, 30, tzinfo=UTC)

_ENV_KEYS = ("PERIOD_TIMEZONE", "PERIOD_LOG_LEVEL", "PERIOD_LOG_TO_FILE")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep user config files and PERIOD_* variables out of tests."""

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(
        "period.config.settings.user_config_dir",
        lambda *_, **__: str(tmp_path / "config"),
    )
    monkeypatch.setattr(
        "period.config.settings.user_cache_dir",
        lambda *_, **__: str(tmp_path / "cache"),
    )
    reset_settings()
    yield
    # dotenv loading writes straight into os.environ
    for key in _ENV_KEYS:
        os.environ.pop(key, None)
    reset_settings()


@pytest.fixture
def reference() -> datetime:
    """Fixed reference instant: Sunday 2026-02-22 14:30 UTC."""

    return REFERENCE


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch, reference: datetime) -> datetime:
    """Pin period.clock.now() to the reference instant."""

    monkeypatch.setattr("period.clock.now", lambda tz=None: reference)
    return reference
