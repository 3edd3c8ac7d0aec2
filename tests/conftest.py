"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

from upgrade_guard.config import clear_default_values
from upgrade_guard.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_configuration(monkeypatch, tmp_path):
    """Keep host environment and .env files from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("UPGRADE_GUARD_") or name == "GVFS_UNATTENDED":
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_default_values()
    get_settings.cache_clear()
    yield
    clear_default_values()
    get_settings.cache_clear()
