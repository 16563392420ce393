from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Make the registry package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from registry.core import config as core_config  # noqa: E402
from registry.core.logging_config import setup_logging  # noqa: E402


@pytest.fixture()
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield core_config.get_settings
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("EMAIL_REGISTRY_DATA_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = fresh_settings()

    assert settings.data_file == Path("accounts.json")
    assert settings.log_level == "INFO"


def test_environment_overrides(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.setenv("EMAIL_REGISTRY_DATA_FILE", str(tmp_path / "reg.json"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = fresh_settings()

    assert settings.data_file == tmp_path / "reg.json"
    assert settings.log_level == "DEBUG"


def test_blank_data_file_falls_back_to_default(fresh_settings, monkeypatch):
    monkeypatch.setenv("EMAIL_REGISTRY_DATA_FILE", "   ")

    assert fresh_settings().data_file == Path("accounts.json")


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        setup_logging("DEBUG")
        assert root.handlers == before + [sentinel]
    finally:
        root.removeHandler(sentinel)
