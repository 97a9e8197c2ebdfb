# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tasklist.config import DEFAULT_SOURCE_URL, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("TASKLIST_"):
            monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.source_enabled is True
    assert s.source_url == DEFAULT_SOURCE_URL
    assert s.page_size == 10
    assert s.load_retries == 0
    assert s.data_dir == Path(".local/tasklist")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_SOURCE_ENABLED", "off")
    monkeypatch.setenv("TASKLIST_SOURCE_URL", "http://example.test/tasks")
    monkeypatch.setenv("TASKLIST_PAGE_SIZE", "25")
    monkeypatch.setenv("TASKLIST_LOAD_RETRIES", "2")
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.source_enabled is False
    assert s.source_url == "http://example.test/tasks"
    assert s.page_size == 25
    assert s.load_retries == 2
    assert s.data_dir == tmp_path


def test_bad_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKLIST_PAGE_SIZE", "many")
    monkeypatch.setenv("TASKLIST_LOAD_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("TASKLIST_LOAD_RETRIES", "-3")

    s = Settings.from_env()

    assert s.page_size == 10
    assert s.load_timeout_seconds == 10.0
    assert s.load_retries == 0
