"""Pydantic models for rowgrid configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ViewConfig(BaseModel):
    """Terminal view configuration."""

    width: int | None = 120


class TableConfig(BaseModel):
    """Default table options."""

    description: bool = True
    escape_special_chars: bool = True
    length: Literal["chars", "cells"] = "chars"


class RowgridConfig(BaseModel):
    """Top-level rowgrid configuration."""

    view: ViewConfig = ViewConfig()
    table: TableConfig = TableConfig()
    # Type name -> filter name, e.g. {"list": "comma_join"}
    filter_classes: dict[str, str] = {"list": "comma_join", "dict": "inspect"}
