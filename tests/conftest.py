"""Shared pytest fixtures for rowgrid tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rowgrid import config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the config file at an empty temp dir and clear width overrides."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("ROWGRID_WIDTH", raising=False)
    config._configured_view_width.cache_clear()
    yield config_home
    config._configured_view_width.cache_clear()
