"""Column width computation and the shrink-to-fit resizer.

Widths exclude border decoration. A rendered line is ``"| "`` plus the cells
joined by ``" | "`` plus ``" |"``, so its total length is
``sum(widths) + BORDER_LENGTH * len(widths) + 1``.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass

from .text import MIN_ELLIPSIS_WIDTH, TextMetrics

BORDER_LENGTH = 3

# Narrowest column that still shows a truncated value with its marker.
MIN_FIELD_LENGTH = MIN_ELLIPSIS_WIDTH


@dataclass(frozen=True)
class Overflow:
    """Minimum column widths cannot fit the target width."""

    max_width: int
    required_width: int
    field_count: int

    @property
    def message(self) -> str:
        return (
            f"{self.field_count} fields need at least {self.required_width} characters "
            f"but the table is limited to {self.max_width}"
        )


def rendered_width(field_lengths: Mapping[Hashable, int]) -> int:
    """Total line length for these column widths, borders included."""
    return sum(field_lengths.values()) + BORDER_LENGTH * len(field_lengths) + 1


def natural_field_lengths(
    fields: Sequence[Hashable],
    headers: Mapping[Hashable, str],
    rows: Sequence[Mapping[Hashable, str]],
    metrics: TextMetrics,
) -> dict[Hashable, int]:
    """Widest header or cell per field."""
    lengths = {field: metrics.size(headers.get(field, "")) for field in fields}
    for row in rows:
        for field in fields:
            size = metrics.size(row.get(field, ""))
            if size > lengths[field]:
                lengths[field] = size
    return lengths


def shrink_field_lengths(
    field_lengths: Mapping[Hashable, int],
    max_width: int,
    min_length: int = MIN_FIELD_LENGTH,
) -> dict[Hashable, int] | Overflow:
    """Narrow the widest columns until the table fits ``max_width``.

    No column is narrowed below ``min_length`` (or below its natural width
    when that is smaller). Equally wide columns lose one unit each in field
    order. Returns ``Overflow`` when even the minimum widths do not fit.
    """
    lengths = dict(field_lengths)
    budget = max_width - BORDER_LENGTH * len(lengths) - 1
    floors = {field: min(length, min_length) for field, length in lengths.items()}

    required = sum(floors.values())
    if required > budget:
        return Overflow(
            max_width=max_width,
            required_width=rendered_width(floors),
            field_count=len(lengths),
        )

    excess = sum(lengths.values()) - budget
    if excess <= 0:
        return lengths

    def clamped(level: int) -> dict[Hashable, int]:
        return {field: max(floors[field], min(length, level)) for field, length in lengths.items()}

    # Largest cut level whose clamped widths still fit.
    low, high = 0, max(lengths.values())
    while high - low > 1:
        mid = (low + high) // 2
        if sum(clamped(mid).values()) <= budget:
            low = mid
        else:
            high = mid
    shrunk = clamped(low)

    # Columns cut to exactly the level lose their last unit in field order,
    # so the spare units go back to the trailing ones.
    leftover = budget - sum(shrunk.values())
    cut = [field for field, length in lengths.items() if length > low and shrunk[field] == low]
    for field in cut[len(cut) - leftover :]:
        shrunk[field] += 1
    return shrunk


def compute_field_lengths(
    fields: Sequence[Hashable],
    headers: Mapping[Hashable, str],
    rows: Sequence[Mapping[Hashable, str]],
    metrics: TextMetrics,
    overrides: Mapping[Hashable, int] | None = None,
    max_width: int | None = None,
) -> dict[Hashable, int] | Overflow:
    """Final column widths, or ``Overflow`` when they cannot fit.

    Explicit overrides win outright and disable shrinking. Otherwise the
    natural widths are shrunk to ``max_width`` when one is given.
    """
    lengths = natural_field_lengths(fields, headers, rows, metrics)
    if overrides is not None:
        lengths.update((field, int(length)) for field, length in overrides.items() if field in lengths)
        return lengths
    if max_width is None:
        return lengths
    return shrink_field_lengths(lengths, max_width)
