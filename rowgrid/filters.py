"""Cell and header filters.

A filter spec is one of:

- any callable, called with the value and returning its replacement
- ``MethodRef(name, args)``, called as a method on the value
- ``RegistryName(name)``, looked up in the named filter registry
- a bare name or ``(name, *args)`` tuple, resolved at call time: a method on
  the value when it has one, otherwise a registry entry
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Any


class FilterError(LookupError):
    """A filter spec could not be resolved against a value or the registry."""


@dataclass(frozen=True)
class MethodRef:
    """Call ``value.<name>(*args)``."""

    name: str
    args: tuple = ()


@dataclass(frozen=True)
class RegistryName:
    """Call the registry filter ``name`` with the value."""

    name: str


FilterSpec = Callable[[Any], Any] | MethodRef | RegistryName | str | tuple


def comma_join(value: Any) -> str:
    return ", ".join(str(item) for item in value)


FILTERS: Mapping[str, Callable[[Any], Any]] = {
    "comma_join": comma_join,
    "inspect": repr,
    "to_s": str,
}


def default_filter_classes() -> dict[type, FilterSpec]:
    """Fresh copy of the built-in class-to-filter table."""
    return {list: RegistryName("comma_join"), dict: RegistryName("inspect")}


def call_filter(
    spec: FilterSpec,
    value: Any,
    registry: Mapping[str, Callable[[Any], Any]] | None = None,
) -> Any:
    """Apply a single filter spec to ``value``."""
    registry = FILTERS if registry is None else registry

    if isinstance(spec, MethodRef):
        method = getattr(value, spec.name, None)
        if not callable(method):
            raise FilterError(f"{type(value).__name__} value has no method {spec.name!r}")
        return method(*spec.args)

    if isinstance(spec, RegistryName):
        return _registry_filter(spec.name, registry)(value)

    if callable(spec):
        return spec(value)

    if isinstance(spec, str):
        name, args = spec, ()
    elif isinstance(spec, tuple) and spec and isinstance(spec[0], str):
        name, args = spec[0], spec[1:]
    else:
        raise FilterError(f"Unsupported filter spec: {spec!r}")

    method = getattr(value, name, None)
    if callable(method):
        return method(*args)
    return _registry_filter(name, registry)(value, *args)


def _registry_filter(name: str, registry: Mapping[str, Callable[..., Any]]) -> Callable[..., Any]:
    try:
        return registry[name]
    except KeyError:
        raise FilterError(f"No filter named {name!r}") from None


def class_default_filters(
    rows: list[dict],
    fields: list[Hashable],
    filter_classes: Mapping[type, FilterSpec],
) -> dict[Hashable, FilterSpec]:
    """Pick a default filter for each field whose values all share one class.

    Fields with values of several classes, or whose single class is not in
    ``filter_classes``, get no default.
    """
    defaults: dict[Hashable, FilterSpec] = {}
    if not rows:
        return defaults
    for field in fields:
        classes = {type(row.get(field)) for row in rows}
        if len(classes) != 1:
            continue
        klass = classes.pop()
        if klass in filter_classes:
            defaults[field] = filter_classes[klass]
    return defaults


def filter_rows(
    rows: list[dict],
    fields: list[Hashable],
    filters: Mapping[Hashable, FilterSpec],
    registry: Mapping[str, Callable[[Any], Any]] | None = None,
) -> list[dict]:
    """Build new rows holding only ``fields``, each value run through its filter."""
    filtered = []
    for row in rows:
        new_row = {}
        for field in fields:
            value = row.get(field)
            spec = filters.get(field)
            new_row[field] = call_filter(spec, value, registry) if spec is not None else value
        filtered.append(new_row)
    return filtered
