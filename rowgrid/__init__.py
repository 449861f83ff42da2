"""rowgrid - Aligned, width-constrained text tables for the terminal."""

try:
    from importlib.metadata import version

    __version__ = version("rowgrid")
except Exception:
    __version__ = "0.0.0-dev"

from .filters import FilterError, MethodRef, RegistryName
from .hooks import RowHooks, default_hooks
from .models import TableOptions
from .render import render
from .table import Table, describe_rows
from .text import format_cell
from .vertical import VerticalTable, render_vertical
from .widths import Overflow

__all__ = [
    "FilterError",
    "MethodRef",
    "Overflow",
    "RegistryName",
    "RowHooks",
    "Table",
    "TableOptions",
    "VerticalTable",
    "__version__",
    "default_hooks",
    "describe_rows",
    "format_cell",
    "render",
    "render_vertical",
]
