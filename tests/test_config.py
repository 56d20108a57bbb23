"""Tests for environment-driven settings."""

from collections.abc import Iterator

import pytest

from todo_api.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TITLE", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(f"TODO_API_{name}", raising=False)

    assert get_settings() == Settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_API_TITLE", "Chores")
    monkeypatch.setenv("TODO_API_PORT", "9000")
    monkeypatch.setenv("TODO_API_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.title == "Chores"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_invalid_port_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_API_PORT", "not-a-port")

    assert get_settings().port == 8000
