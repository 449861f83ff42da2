"""Per-call table options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..filters import FILTERS, FilterSpec
from ..filters import default_filter_classes as _default_filter_classes
from ..hooks import RowHooks
from ..text import METRICS


class TableOptions(BaseModel):
    """Immutable options for a single render call.

    Unknown keywords are kept as extra attributes so row hooks can read their
    own options (``query``, ``limit``, ...).
    """

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    fields: list[Any] | None = None
    headers: dict[Any, Any] | list[Any] | bool | None = None
    field_lengths: dict[Any, int] | None = None
    # Unset means the configured view width; an explicit None disables shrinking.
    max_width: int | None = None
    resize: bool = True
    number: bool = False
    change_fields: dict[Any, Any] | list[Any] = {}
    filters: dict[Any, Any] = {}
    header_filter: Any = None
    filter_values: bool = False
    filter_classes: dict[Any, Any] = {}
    default_filter_classes: dict[Any, Any] = Field(default_factory=_default_filter_classes)
    filter_registry: dict[str, Any] = {}
    vertical: bool = False
    all_fields: bool = False
    description: bool = True
    escape_special_chars: bool = True
    return_rows: bool = False
    delete_callbacks: list[str] = []
    hooks: RowHooks | None = None
    length: str = "chars"

    @field_validator("delete_callbacks", mode="before")
    @classmethod
    def wrap_single_name(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("length")
    @classmethod
    def known_metric(cls, v: str) -> str:
        if v not in METRICS:
            raise ValueError(f"unknown length metric {v!r}; expected one of {sorted(METRICS)}")
        return v

    @classmethod
    def coerce(cls, options: TableOptions | Mapping[str, Any] | None = None, **overrides: Any) -> TableOptions:
        """Build options from a model, a mapping or keywords; keywords win."""
        if isinstance(options, cls):
            if not overrides:
                return options
            data = {name: getattr(options, name) for name in options.model_fields_set}
            data.update(options.model_extra or {})
        else:
            data = dict(options or {})
        data.update(overrides)
        return cls(**data)

    def with_defaults(self, **defaults: Any) -> TableOptions:
        """Copy with ``defaults`` applied to options the caller did not set."""
        update = {name: value for name, value in defaults.items() if name not in self.model_fields_set}
        if not update:
            return self
        return self.model_copy(update=update)

    def merged_filter_classes(self) -> dict[type, FilterSpec]:
        return {**self.default_filter_classes, **self.filter_classes}

    def merged_filter_registry(self) -> dict[str, Any]:
        return {**FILTERS, **self.filter_registry}
