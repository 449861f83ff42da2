"""Per-call table state and the bordered renderer.

A ``Table`` is built fresh for every render call. Construction runs the
whole normalization pipeline (fields, headers, cell filters, row numbering,
row hooks, string coercion); ``render()`` lays out the columns and draws::

    +-----+--------+
    | age | weight |
    +-----+--------+
    | 10  | 100    |
    | 80  | 500    |
    +-----+--------+
    2 rows in set
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import Any

from .config import get_view_width
from .filters import class_default_filters, filter_rows
from .headers import resolve_headers
from .models.options import TableOptions
from .normalize import change_fields_map, normalize_rows, resolve_fields
from .text import escape_special_chars, format_cell, get_metrics
from .widths import Overflow, compute_field_lengths

log = logging.getLogger(__name__)

# Reserved field holding 1-based row numbers when ``number`` is set.
NUMBER_FIELD = "rowgrid_number"
NUMBER_HEADER = "number"


def describe_rows(count: int) -> str:
    """Row-count footer line."""
    return f"{count} {'row' if count == 1 else 'rows'} in set"


class Table:
    """Normalized rows plus the options and layout used to draw them."""

    def __init__(self, rows: Sequence[Any], options: TableOptions | None = None) -> None:
        self.options = options or TableOptions()
        self.metrics = get_metrics(self.options.length)
        self.registry = self.options.merged_filter_registry()

        renames = change_fields_map(self.options.change_fields)
        self.fields: list[Hashable] = resolve_fields(
            rows,
            fields=self.options.fields,
            all_fields=self.options.all_fields,
            renames=renames,
        )
        self.headers = self._set_headers()
        self.rows = self._set_rows(rows, renames)
        if self.options.number:
            self.fields.insert(0, NUMBER_FIELD)
            if self.headers is not None:
                self.headers = {NUMBER_FIELD: NUMBER_HEADER, **self.headers}
        self.field_lengths: dict[Hashable, int] = {}

    def _set_headers(self) -> dict[Hashable, str] | None:
        if self.options.headers is False:
            return None
        overrides = self.options.headers if self.options.headers is not True else None
        return resolve_headers(self.fields, overrides, self.options.header_filter, self.registry)

    def _set_rows(self, raw_rows: Sequence[Any], renames: dict) -> list[dict]:
        rows = normalize_rows(raw_rows, renames)

        filters = dict(self.options.filters)
        if self.options.filter_values:
            defaults = class_default_filters(rows, self.fields, self.options.merged_filter_classes())
            for field, spec in defaults.items():
                filters.setdefault(field, spec)
        rows = filter_rows(rows, self.fields, filters, self.registry)

        if self.options.number:
            for i, row in enumerate(rows):
                row[NUMBER_FIELD] = str(i + 1)

        if self.options.hooks is not None:
            rows = self.options.hooks.run(rows, self.options, disabled=self.options.delete_callbacks)

        return self._validate_values(rows)

    def _validate_values(self, rows: list[dict]) -> list[dict]:
        """Coerce every cell to a string, escaping special characters if asked."""
        for row in rows:
            for field in self.fields:
                value = row.get(field)
                text = "" if value is None else str(value)
                if self.options.escape_special_chars:
                    text = escape_special_chars(text)
                row[field] = text
        return rows

    def target_width(self) -> int | None:
        if not self.options.resize:
            return None
        if "max_width" in self.options.model_fields_set:
            return self.options.max_width
        return get_view_width()

    def setup_field_lengths(self) -> Overflow | None:
        result = compute_field_lengths(
            self.fields,
            self.headers or {},
            self.rows,
            self.metrics,
            overrides=self.options.field_lengths,
            max_width=self.target_width(),
        )
        if isinstance(result, Overflow):
            return result
        self.field_lengths = result
        log.debug("Field lengths: %s", result)
        return None

    def render(self) -> str | Overflow:
        """Draw the table, or return ``Overflow`` if the columns cannot fit."""
        body: list[str] = []
        if self.rows:
            overflow = self.setup_field_lengths()
            if overflow is not None:
                return overflow
            body += self.render_header()
            body += self.render_rows()
            body += self.render_footer()
        if self.options.description:
            body.append(describe_rows(len(self.rows)))
        return "\n".join(body)

    def render_header(self) -> list[str]:
        if self.headers is None:
            return [self.render_border()]
        return [self.render_border(), self.render_line(self.headers), self.render_border()]

    def render_rows(self) -> list[str]:
        return [self.render_line(row) for row in self.rows]

    def render_footer(self) -> list[str]:
        return [self.render_border()]

    def render_border(self) -> str:
        return "+-" + "-+-".join("-" * self.field_lengths[f] for f in self.fields) + "-+"

    def render_line(self, values: dict) -> str:
        cells = [format_cell(values.get(f, ""), self.field_lengths[f], self.metrics) for f in self.fields]
        return "| " + " | ".join(cells) + " |"
