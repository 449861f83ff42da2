"""Field resolution and row normalization.

Row shape is taken from the first row only: if it is a mapping every row is
treated as a mapping, if it is a sequence every row is treated as a
sequence. Mixing shapes in one call is not supported.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any


def indices_dict(values: Sequence[Any]) -> dict[int, Any]:
    """Map each position of ``values`` to its item."""
    return dict(enumerate(values))


def is_sequence_row(row: Any) -> bool:
    return isinstance(row, Sequence) and not isinstance(row, (str, bytes))


def sort_fields(fields: list[Hashable]) -> list[Hashable]:
    """Sort ascending by string form, keeping the original order on ties."""
    return sorted(fields, key=str)


def default_fields(rows: Sequence[Any], all_fields: bool = False) -> list[Hashable]:
    """Fields inferred from the rows when none are given explicitly."""
    if not rows:
        return []
    first = rows[0]
    if isinstance(first, Mapping):
        if all_fields:
            keys: list[Hashable] = []
            seen: set[Hashable] = set()
            for row in rows:
                for key in row:
                    if key not in seen:
                        seen.add(key)
                        keys.append(key)
        else:
            keys = list(first)
        return sort_fields(keys)
    if is_sequence_row(first):
        return list(range(len(first)))
    return []


def change_fields_map(change_fields: Mapping | Sequence | None) -> dict[Hashable, Hashable]:
    """Normalize a rename spec; a sequence renames position ``i`` to item ``i``."""
    if not change_fields:
        return {}
    if isinstance(change_fields, Mapping):
        return dict(change_fields)
    return indices_dict(change_fields)


def apply_change_fields(fields: list[Hashable], renames: Mapping[Hashable, Hashable]) -> list[Hashable]:
    """Rename fields in place, or append names that match no existing field."""
    fields = list(fields)
    for old, new in renames.items():
        if old in fields:
            fields[fields.index(old)] = new
        else:
            fields.append(new)
    return fields


def resolve_fields(
    rows: Sequence[Any],
    fields: Sequence[Hashable] | None = None,
    all_fields: bool = False,
    renames: Mapping[Hashable, Hashable] | None = None,
) -> list[Hashable]:
    """Final ordered field list for a table."""
    resolved = list(fields) if fields is not None else default_fields(rows, all_fields)
    return apply_change_fields(resolved, renames or {})


def normalize_rows(rows: Sequence[Any], renames: Mapping[Hashable, Hashable] | None = None) -> list[dict]:
    """Copy rows into field-keyed dicts, mirroring renames onto their keys."""
    rows = list(rows or [])
    if rows and is_sequence_row(rows[0]):
        normalized = [indices_dict(row) for row in rows]
    else:
        normalized = [dict(row) for row in rows]
    for old, new in (renames or {}).items():
        for row in normalized:
            if old in row:
                row[new] = row.pop(old)
    return normalized
