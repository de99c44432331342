"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from provider_virtono.config import Settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OPENVZ_ONLY_FIELDS_POLICY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.PROJECT_NAME == "provider-virtono"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.OPENVZ_ONLY_FIELDS_POLICY == "warn"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "console")
    monkeypatch.setenv("OPENVZ_ONLY_FIELDS_POLICY", "reject")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "console"
    assert settings.OPENVZ_ONLY_FIELDS_POLICY == "reject"


def test_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("OPENVZ_ONLY_FIELDS_POLICY", "ignore")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
