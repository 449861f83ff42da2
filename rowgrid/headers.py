"""Header label resolution."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any

from .filters import FilterSpec, call_filter


def resolve_headers(
    fields: Sequence[Hashable],
    overrides: Mapping | Sequence | None = None,
    header_filter: FilterSpec | None = None,
    registry: Mapping[str, Callable[[Any], Any]] | None = None,
) -> dict[Hashable, str]:
    """Label for every field: its string form, then overrides, then the filter.

    A mapping override merges per field. A sequence override labels the
    resolved fields by position. Keys that are not fields are ignored.
    """
    headers: dict[Hashable, Any] = {field: str(field) for field in fields}
    if isinstance(overrides, Mapping):
        headers.update((field, label) for field, label in overrides.items() if field in headers)
    elif overrides:
        for field, label in zip(fields, overrides):
            headers[field] = label
    if header_filter is not None:
        headers = {field: call_filter(header_filter, label, registry) for field, label in headers.items()}
    return {field: "" if label is None else str(label) for field, label in headers.items()}
