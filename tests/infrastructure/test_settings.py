"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import AccountsApiSettings


def test_from_env_defaults(monkeypatch) -> None:
    """Without variables the local accounts service is used."""
    monkeypatch.delenv("ACCOUNTS_API_URL", raising=False)
    monkeypatch.delenv("ACCOUNTS_API_TIMEOUT", raising=False)

    settings = AccountsApiSettings.from_env()

    assert settings.base_url == "http://localhost:5000"
    assert settings.timeout == 10.0
    assert settings.accounts_url == "http://localhost:5000/accounts"


def test_from_env_strips_trailing_slash(monkeypatch) -> None:
    """Base URLs are normalized so the path joins cleanly."""
    monkeypatch.setenv("ACCOUNTS_API_URL", "https://api.example.com/ ")
    monkeypatch.setenv("ACCOUNTS_API_TIMEOUT", "2.5")

    settings = AccountsApiSettings.from_env()

    assert settings.accounts_url == "https://api.example.com/accounts"
    assert settings.timeout == 2.5


def test_invalid_timeout_falls_back_with_warning(monkeypatch) -> None:
    """Unparseable or non-positive timeouts use the default."""
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)

    for raw in ("soon", "0", "-1"):
        monkeypatch.setenv("ACCOUNTS_API_TIMEOUT", raw)
        assert AccountsApiSettings.from_env().timeout == 10.0

    assert fake_logger.warning.call_count == 3


@pytest.mark.parametrize(
    "raw_url",
    [
        "http://localhost:99999",
        "localhost:5000",
        "ftp://accounts.example.com",
        "http://",
    ],
)
def test_from_env_rejects_malformed_base_url(monkeypatch, raw_url) -> None:
    """Unusable base URLs fail at configuration time."""
    monkeypatch.setenv("ACCOUNTS_API_URL", raw_url)
    monkeypatch.delenv("ACCOUNTS_API_TIMEOUT", raising=False)

    with pytest.raises(RuntimeError, match="Invalid ACCOUNTS_API_URL"):
        AccountsApiSettings.from_env()


def test_direct_construction_validates_port() -> None:
    with pytest.raises(RuntimeError, match="Invalid ACCOUNTS_API_URL"):
        AccountsApiSettings(base_url="http://localhost:99999")
