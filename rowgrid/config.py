"""Configuration management for rowgrid."""

import builtins
import functools
import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .filters import FilterSpec, RegistryName
from .models.config import RowgridConfig

log = logging.getLogger(__name__)

# Application name for XDG paths
APP_NAME = "rowgrid"

# Environment variable overriding view.width
WIDTH_ENV = "ROWGRID_WIDTH"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "view": {
        "width": 120,  # target table width; null disables shrinking
    },
    "table": {
        "description": True,
        "escape_special_chars": True,
        "length": "chars",  # "chars" or "cells"
    },
    "filter_classes": {
        "list": "comma_join",
        "dict": "inspect",
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)

    return config


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)

    _configured_view_width.cache_clear()


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = {key: (deep_merge(value, {}) if isinstance(value, dict) else value) for key, value in base.items()}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_settings() -> RowgridConfig:
    """Load configuration as a validated model."""
    return RowgridConfig.model_validate(load_config())


def get_view_width() -> int | None:
    """
    Get the default table width.

    Priority:
    1. ROWGRID_WIDTH environment variable
    2. view.width in config.json
    3. Built-in default (120)

    The config file is read on first use and cached until save_config().
    """
    env_width = os.environ.get(WIDTH_ENV)
    if env_width:
        return int(env_width)

    return _configured_view_width(get_config_path())


@functools.lru_cache(maxsize=8)
def _configured_view_width(config_path: Path) -> int | None:
    """view.width from the config file at ``config_path``, read once until the next save."""
    try:
        return load_settings().view.width
    except ValidationError as e:
        default = DEFAULT_CONFIG["view"]["width"]
        log.warning("Invalid config in %s, using width %s: %s", config_path, default, e)
        return default


def resolve_filter_classes(names: dict[str, str]) -> dict[type, FilterSpec]:
    """Turn a ``{"list": "comma_join"}`` table into ``{list: RegistryName(...)}``.

    Type names are looked up among the builtins.
    """
    table: dict[type, FilterSpec] = {}
    for type_name, filter_name in names.items():
        klass = getattr(builtins, type_name, None)
        if not isinstance(klass, type):
            raise ValueError(f"Unknown type in filter_classes: {type_name!r}")
        table[klass] = RegistryName(filter_name)
    return table
