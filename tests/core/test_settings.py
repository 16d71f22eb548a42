import pytest
from pydantic import ValidationError

from enumerable.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ENUMERABLE_FAST_PATH", raising=False)
    monkeypatch.delenv("ENUMERABLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings.load()
    assert settings.FAST_PATH is True
    assert settings.LOG_LEVEL == "INFO"


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("ENUMERABLE_FAST_PATH", "false")
    monkeypatch.setenv("ENUMERABLE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = Settings.load()
    assert settings.FAST_PATH is False
    # Package-specific variable wins over the generic one
    assert settings.LOG_LEVEL == "DEBUG"


def test_generic_log_level_fallback(monkeypatch):
    monkeypatch.delenv("ENUMERABLE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert Settings.load().LOG_LEVEL == "WARNING"


def test_invalid_fast_path(monkeypatch):
    monkeypatch.setenv("ENUMERABLE_FAST_PATH", "sometimes")
    with pytest.raises(ValidationError):
        Settings.load()
