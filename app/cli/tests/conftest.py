"""Shared pytest fixtures for app.cli tests."""

from __future__ import annotations

from pathlib import Path

import pytest

_MEDIA_ENV_KEYS = ("MEDIA_MAX_MB", "MEDIA_FETCH_TIMEOUT", "MEDIA_USER_AGENT")


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    monkeypatch.setenv("INBOUND_MEDIA_DATA_DIR", str(data_dir))
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / ".env"))
    for key in _MEDIA_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return data_dir


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_data_dir: Path):
    from app.inbound.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def data_dir(_isolate_data_dir: Path) -> Path:
    return _isolate_data_dir
