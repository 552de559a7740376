"""Tests for configuration."""

from pathlib import Path

import pytest

from catholic_quotes.config import Config, get_data_dir, get_default_state_dir

ENV_VARS = ("QUOTES_SOURCE", "CALENDAR_SOURCE", "QUOTES_STATE_DIR", "LOG_LEVEL", "REQUEST_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config.from_env()
    assert config.quotes_source == str(get_data_dir() / "quotes_database.json")
    assert config.calendar_source == str(get_data_dir() / "liturgical_calendar.json")
    assert config.state_dir == get_default_state_dir()
    assert config.log_level == "INFO"
    assert config.request_timeout == 10


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("QUOTES_SOURCE", "https://example.org/quotes.json")
    monkeypatch.setenv("CALENDAR_SOURCE", "/srv/calendar.json")
    monkeypatch.setenv("QUOTES_STATE_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("REQUEST_TIMEOUT", "3")

    config = Config.from_env()
    assert config.quotes_source == "https://example.org/quotes.json"
    assert config.calendar_source == "/srv/calendar.json"
    assert config.state_dir == Path(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.request_timeout == 3


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config.from_env()


@pytest.mark.parametrize("value", ["soon", "0", "-5"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("REQUEST_TIMEOUT", value)
    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Config.from_env()


def test_config_frozen():
    config = Config()
    with pytest.raises(AttributeError):
        config.log_level = "DEBUG"  # type: ignore[misc]
