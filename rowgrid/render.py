"""Render entry point.

Picks vertical rendering, the normalized-rows short circuit, or the bordered
table, and falls back to vertical rendering when the columns cannot fit the
target width.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .models.options import TableOptions
from .table import Table
from .vertical import render_vertical
from .widths import Overflow

log = logging.getLogger(__name__)


def render(
    rows: Sequence[Any],
    options: TableOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str | list[dict]:
    """Render rows (sequences or mappings) as a text table.

    Options may be given as a ``TableOptions``, a mapping, keyword arguments,
    or a mix; keywords win. Returns the table text, or the normalized rows
    when ``return_rows`` is set.

    Examples:
        render([[1, 2], [2, 3]])
        render([{"age": 10, "weight": 100}], headers={"weight": "Weight(lbs)"})
        render([["a", 1], ["b", 2]], change_fields=["letters", "numbers"])
    """
    opts = TableOptions.coerce(options, **kwargs)
    rows = list(rows or [])

    if opts.vertical:
        return render_vertical(rows, opts)

    table = Table(rows, opts)
    if opts.return_rows:
        return table.rows

    result = table.render()
    if isinstance(result, Overflow):
        log.warning(
            "Too many fields for the current width (%s). Configure your width "
            "and/or fields to avoid this. Defaulting to a vertical table.",
            result.message,
        )
        return render_vertical(rows, opts)
    return result
