from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kalendar.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("KALENDAR_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def wednesday_midnight() -> datetime:
    # 2026-10-21 is a Wednesday.
    return datetime(2026, 10, 21, tzinfo=timezone.utc)
