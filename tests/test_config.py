"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from studio_contracts.config import Settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DASHBOARD_PAGE_SIZE", "10")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.dashboard_page_size == 10


def test_settings_reject_unsupported_page_size() -> None:
    with pytest.raises(ValidationError):
        Settings(dashboard_page_size=25)
