"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from kakeibo.infrastructure import settings as settings_module
from kakeibo.infrastructure.settings import KakeiboSettings


@pytest.fixture
def env(monkeypatch):
    """Isolate settings from any local .env file and the app logger."""
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "KAKEIBO_DEFAULT_YIELD_RATE",
        "KAKEIBO_DEFAULT_BONUS_FREQUENCY",
        "KAKEIBO_USER_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_defaults_when_unset(env) -> None:
    """Unset variables fall back to the built-in defaults."""
    settings = KakeiboSettings.from_env()

    assert settings.default_yield_rate == 5.0
    assert settings.default_bonus_frequency == 2
    assert settings.user_id is None


def test_from_env_parses_values(env, monkeypatch) -> None:
    """Numeric values are parsed and the user id is stripped."""
    monkeypatch.setenv("KAKEIBO_DEFAULT_YIELD_RATE", "3.5")
    monkeypatch.setenv("KAKEIBO_DEFAULT_BONUS_FREQUENCY", " 1 ")
    monkeypatch.setenv("KAKEIBO_USER_ID", "  user-1 ")

    settings = KakeiboSettings.from_env()

    assert settings.default_yield_rate == 3.5
    assert settings.default_bonus_frequency == 1
    assert settings.user_id == "user-1"


def test_from_env_warns_on_invalid_numbers(env, monkeypatch) -> None:
    """Invalid numbers are ignored with a warning."""
    monkeypatch.setenv("KAKEIBO_DEFAULT_YIELD_RATE", "five")
    monkeypatch.setenv("KAKEIBO_DEFAULT_BONUS_FREQUENCY", "2.5")

    settings = KakeiboSettings.from_env()

    assert settings.default_yield_rate == 5.0
    assert settings.default_bonus_frequency == 2
    assert env.warning.call_count == 2
