"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from src.adapters.driven.config.settings import Settings, load_settings
from src.ports.settings import TransportSettingsPort

__all__ = []

ENV_VARS = (
    "HTTP_SCHEME",
    "HTTP_TIMEOUT_SECONDS",
    "HTTP_USER_AGENT",
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Remove transport variables a developer's .env may have set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_defaults() -> None:
    """Unset variables should fall back to defaults."""
    settings = load_settings()

    assert settings.scheme == "https"
    assert settings.timeout_sec == 30.0
    assert settings.max_requests == 60
    assert settings.window_sec == 60.0


def test_load_settings_from_environment(monkeypatch) -> None:
    """Environment variables should override defaults."""
    monkeypatch.setenv("HTTP_SCHEME", "HTTP")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("HTTP_USER_AGENT", "  test-agent/1.0 ")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "30")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "10")

    settings = load_settings()

    assert settings.scheme == "http"
    assert settings.timeout_sec == 2.5
    assert settings.user_agent == "test-agent/1.0"
    assert settings.max_requests == 30
    assert settings.window_sec == 10.0


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("HTTP_TIMEOUT_SECONDS", "soon"),
        ("HTTP_TIMEOUT_SECONDS", "0"),
        ("RATE_LIMIT_MAX_REQUESTS", "-5"),
        ("RATE_LIMIT_MAX_REQUESTS", "1.5"),
        ("RATE_LIMIT_WINDOW_SECONDS", "-1"),
    ],
)
def test_load_settings_rejects_bad_numbers(monkeypatch, name: str, value: str) -> None:
    """Malformed or non-positive numbers should raise RuntimeError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError, match=f"{name} must be a positive"):
        load_settings()


def test_load_settings_rejects_unknown_scheme(monkeypatch) -> None:
    """Only http and https are allowed."""
    monkeypatch.setenv("HTTP_SCHEME", "ftp")

    with pytest.raises(ValueError):
        load_settings()


def test_settings_rejects_blank_user_agent() -> None:
    """User-Agent must not be blank."""
    with pytest.raises(ValidationError, match="User-Agent"):
        Settings(user_agent="   ")


def test_settings_to_port() -> None:
    """Settings should be wrapped into the transport port."""
    port = Settings(scheme="http", timeout_sec=5, max_requests=2, window_sec=1).to_port()

    assert isinstance(port, TransportSettingsPort)
    assert port.scheme == "http"
    assert port.timeout_sec == 5
    assert port.max_requests == 2
    assert port.window_sec == 1
