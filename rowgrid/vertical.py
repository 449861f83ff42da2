"""One-field-per-line rendering for tables too wide for the terminal.

Example output::

    ****** 1. row ******
      name: batman
    weight: 180
    1 row in set
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .models.options import TableOptions
from .table import Table

# Vertical output has no columns to shrink and keeps raw newlines.
VERTICAL_DEFAULTS: dict[str, Any] = {"escape_special_chars": False, "resize": False}


class VerticalTable(Table):
    """Render each row as a block of ``header: value`` lines."""

    def setup_field_lengths(self) -> None:
        # no columns, so nothing to size or overflow
        return None

    def render_header(self) -> list[str]:
        return []

    def render_footer(self) -> list[str]:
        return []

    def render_rows(self) -> list[str]:
        labels = self.headers or {f: str(f) for f in self.fields}
        longest = max((self.metrics.size(labels[f]) for f in self.fields), default=0)
        stars = "*" * max(longest + longest // 2, 3)
        blocks = []
        for i, row in enumerate(self.rows):
            lines = [f"{stars} {i + 1}. row {stars}"]
            for field in self.fields:
                label = labels[field]
                padding = " " * (longest - self.metrics.size(label))
                lines.append(f"{padding}{label}: {row.get(field, '')}")
            blocks.append("\n".join(lines))
        return blocks


def render_vertical(rows: Sequence[Any], options: TableOptions | None = None) -> str:
    """Render ``rows`` as a vertical table."""
    options = (options or TableOptions()).with_defaults(**VERTICAL_DEFAULTS)
    return VerticalTable(rows, options).render()
