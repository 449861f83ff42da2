"""Named row-transform hooks.

Hooks run after cell filtering and before column widths are computed. Each
receives the full row list and the table options and returns the row list
that replaces it. Hooks run in ascending order of their registered names.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

RowHook = Callable[[list[dict], Any], Iterable[dict]]


class RowHooks:
    """Caller-owned ordered registry of row hooks."""

    def __init__(self, hooks: dict[str, RowHook] | None = None) -> None:
        self._hooks: dict[str, RowHook] = dict(hooks or {})

    def register(self, name: str, hook: RowHook | None = None):
        """Register ``hook`` under ``name``; usable as a decorator."""
        if hook is not None:
            self._hooks[name] = hook
            return hook

        def decorator(func: RowHook) -> RowHook:
            self._hooks[name] = func
            return func

        return decorator

    def unregister(self, name: str) -> None:
        self._hooks.pop(name, None)

    def names(self) -> list[str]:
        return sorted(self._hooks)

    def __contains__(self, name: object) -> bool:
        return name in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)

    def run(self, rows: list[dict], options: Any, disabled: Iterable[str] = ()) -> list[dict]:
        """Apply every enabled hook in name order."""
        skip = set(disabled)
        for name in self.names():
            if name in skip:
                continue
            rows = list(self._hooks[name](rows, options))
        return rows


def query_hook(rows: list[dict], options: Any) -> list[dict]:
    """Keep rows where a field matches its pattern (``query={field: regex}``).

    Matching is case-insensitive. A row matching several patterns is kept once.
    """
    query = getattr(options, "query", None)
    if not query:
        return rows
    patterns = [(field, re.compile(str(pattern), re.IGNORECASE)) for field, pattern in query.items()]
    return [
        row
        for row in rows
        if any(pattern.search(str(row.get(field, ""))) for field, pattern in patterns)
    ]


def window_hook(rows: list[dict], options: Any) -> list[dict]:
    """Keep ``limit`` rows starting at ``offset`` (both optional)."""
    offset = max(0, int(getattr(options, "offset", None) or 0))
    limit = getattr(options, "limit", None)
    if limit is None:
        return rows[offset:]
    return rows[offset : offset + max(0, int(limit))]


def default_hooks() -> RowHooks:
    """Registry with the built-in ``query`` and ``window`` hooks.

    ``query`` sorts before ``window``, so rows are searched before paging.
    """
    hooks = RowHooks()
    hooks.register("query", query_hook)
    hooks.register("window", window_hook)
    return hooks
