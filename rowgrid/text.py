"""String length metrics and single-cell formatting.

Column widths and cell truncation must agree on what "length" means, so both
go through the same ``TextMetrics`` instance selected by the ``length`` option.
"""

from __future__ import annotations

from typing import Any, Protocol

from rich.cells import cell_len, set_cell_size

ELLIPSIS = "..."

# Below this width a truncated value is cut without an ellipsis marker.
MIN_ELLIPSIS_WIDTH = 5

_SPECIAL_CHARS = str.maketrans({"\t": "\\t", "\r": "\\r", "\n": "\\n"})


class TextMetrics(Protocol):
    """Measures, cuts and pads strings in a single unit of width."""

    def size(self, text: str) -> int: ...

    def slice(self, text: str, width: int) -> str: ...

    def ljust(self, text: str, width: int) -> str: ...


class CharMetrics:
    """One unit per code point."""

    def size(self, text: str) -> int:
        return len(text)

    def slice(self, text: str, width: int) -> str:
        return text[:width]

    def ljust(self, text: str, width: int) -> str:
        return text.ljust(width)


class CellMetrics:
    """Terminal cells, so double-width characters count twice."""

    def size(self, text: str) -> int:
        return cell_len(text)

    def slice(self, text: str, width: int) -> str:
        # set_cell_size pads with a space when a wide character is split
        return set_cell_size(text, width)

    def ljust(self, text: str, width: int) -> str:
        return text + " " * max(0, width - cell_len(text))


METRICS: dict[str, TextMetrics] = {
    "chars": CharMetrics(),
    "cells": CellMetrics(),
}


def get_metrics(name: str) -> TextMetrics:
    """Look up a length metric by name."""
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown length metric: {name!r} (expected one of {sorted(METRICS)})") from None


def format_cell(value: Any, width: int, metrics: TextMetrics | None = None) -> str:
    """Truncate and left-justify ``value`` to exactly ``width`` units.

    Non-string values are converted with ``str()``; ``None`` is blank.

    Values longer than the width are cut to ``width`` when the column is
    narrower than 5, otherwise to ``width - 3`` followed by ``...``.
    """
    metrics = metrics or METRICS["chars"]
    value = "" if value is None else str(value)
    if width <= 0:
        return ""
    text = value
    if metrics.size(value) > width:
        if width < MIN_ELLIPSIS_WIDTH:
            text = metrics.slice(value, width)
        else:
            text = metrics.slice(value, width - len(ELLIPSIS)) + ELLIPSIS
    return metrics.ljust(text, width)


def escape_special_chars(text: str) -> str:
    """Replace literal tab, carriage return and newline with their escapes."""
    return text.translate(_SPECIAL_CHARS)
