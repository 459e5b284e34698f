"""Tests for settings parsing."""

import logging

import pytest

from orgfolders.environment import EnvironmentName
from settings import settings
from settings.log import LoggingSettings
from settings.settings import SAMPLE_DATA_PATH, Settings


def test_test_settings_are_active() -> None:
    assert settings.environment is EnvironmentName.TESTING
    assert settings.folders.data_path == SAMPLE_DATA_PATH


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("fatal", logging.FATAL), ("bogus", logging.INFO)],
)
def test_logging_level_from_env(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv("LOGGING_LEVEL", value)

    assert LoggingSettings().level == expected


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("FOLDERS_DATA_PATH", raising=False)
    monkeypatch.delenv("FOLDERS_DEFAULT_PAGE_SIZE", raising=False)

    loaded = Settings(_env_file=None)

    assert loaded.environment is EnvironmentName.DEVELOPMENT
    assert loaded.folders.data_path == SAMPLE_DATA_PATH
    assert loaded.folders.default_page_size == 10


def test_invalid_environment_falls_back_to_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "moon")

    assert Settings(_env_file=None).environment is EnvironmentName.DEVELOPMENT


def test_folders_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("FOLDERS_DEFAULT_PAGE_SIZE", "25")

    loaded = Settings(_env_file=None)

    assert loaded.environment is EnvironmentName.STAGING
    assert loaded.folders.default_page_size == 25
