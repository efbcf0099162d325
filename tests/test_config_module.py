"""Tests for :mod:`graphml_export.config`."""

from __future__ import annotations

import pytest

from graphml_export import config


@pytest.fixture(autouse=True)
def fresh_environment():
    config._load_environment.cache_clear()
    yield
    config._load_environment.cache_clear()


def test_get_env_prefers_process_environment(monkeypatch):
    """Explicit environment variables should win over any ``.env`` contents."""

    monkeypatch.setenv("GRAPHML_PRETTY_PRINT", "in-memory")

    assert config.get_env("GRAPHML_PRETTY_PRINT") == "in-memory"


def test_get_env_returns_default_when_missing(monkeypatch):
    """Missing keys should fall back to the provided default value."""

    monkeypatch.delenv("GRAPHML_DOES_NOT_EXIST", raising=False)

    assert config.get_env("GRAPHML_DOES_NOT_EXIST", default="fallback") == "fallback"


def test_environment_is_loaded_once_until_cache_clear(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: calls.append(kwargs))

    config.get_env("ANY")
    config.get_env("ANY")
    assert len(calls) == 1
    assert calls[0]["override"] is False

    config._load_environment.cache_clear()
    config.get_env("ANY")
    assert len(calls) == 2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("False", False), ("no", False), ("off", False)],
)
def test_get_bool_env_parses_flags(monkeypatch, raw, expected):
    monkeypatch.setenv("GRAPHML_FLAG", raw)

    assert config.get_bool_env("GRAPHML_FLAG", not expected) is expected


def test_get_bool_env_falls_back_on_missing_or_unknown(monkeypatch):
    monkeypatch.delenv("GRAPHML_FLAG", raising=False)
    assert config.get_bool_env("GRAPHML_FLAG", True) is True

    monkeypatch.setenv("GRAPHML_FLAG", "maybe")
    assert config.get_bool_env("GRAPHML_FLAG", False) is False
