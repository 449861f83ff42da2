"""CLI entry point for rowgrid."""

import logging

import rich_click as click
from rich.logging import RichHandler

from .. import __version__
from . import config_cmd as _config_mod
from . import render_cmd as _render_mod
from ._console import err_console


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Render rows of data as aligned text tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


# Register commands
cli.add_command(_render_mod.render)
cli.add_command(_config_mod.config)


if __name__ == "__main__":
    cli()
