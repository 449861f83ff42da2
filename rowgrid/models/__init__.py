"""Pydantic models for the rowgrid package."""

from __future__ import annotations

from .config import (
    RowgridConfig,
    TableConfig,
    ViewConfig,
)
from .options import TableOptions

__all__ = [
    "RowgridConfig",
    "TableConfig",
    "TableOptions",
    "ViewConfig",
]
