"""Config commands."""

import json

import rich_click as click
from pydantic import ValidationError
from rich.syntax import Syntax

from ..config import get_config_path, load_config, resolve_filter_classes, save_config
from ..models.config import RowgridConfig
from ._console import console


@click.group()
def config():
    """Manage configuration."""
    pass


@config.command("show")
def config_show():
    """Show current configuration."""
    cfg = load_config()
    json_str = json.dumps(cfg, indent=2)
    syntax = Syntax(json_str, "json", theme="monokai")
    console.print(syntax)


@config.command("path")
def config_path():
    """Show configuration file path."""
    console.print(str(get_config_path()), markup=False, highlight=False, soft_wrap=True)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., view.width 100).

    VALUE is parsed as JSON when possible, so `null` clears view.width and
    `cells` stays a plain string. Values that would make the config invalid
    are rejected and nothing is written.
    """
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value

    cfg = load_config()
    *sections, name = key.split(".")
    target = cfg
    for section in sections:
        if not isinstance(target.get(section), dict):
            target[section] = {}
        target = target[section]
    target[name] = parsed_value

    try:
        settings = RowgridConfig.model_validate(cfg)
        resolve_filter_classes(settings.filter_classes)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise click.BadParameter(errors, param_hint=key) from e
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint=key) from e

    save_config(cfg)
    console.print(f"Set {key} = {parsed_value}", markup=False, highlight=False, soft_wrap=True)
