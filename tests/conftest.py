"""Pytest fixtures."""

import datetime
import pathlib

import pytest

from dtchecker import config


TEST_FOLDER = pathlib.Path(__file__).parent
DATA_FOLDER = TEST_FOLDER / "data"
CONFIG_PATH = DATA_FOLDER / "dtchecker-test.toml"


@pytest.fixture
def current_year() -> int:
    """Year read from the system clock."""
    return datetime.date.today().year


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> config.Settings:
    """Replace the module-level settings with defaults for each test."""
    fresh_settings = config.Settings()
    monkeypatch.setattr(config, "settings", fresh_settings)
    return fresh_settings


@pytest.fixture
def empty_cwd(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> pathlib.Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
