"""Shared CLI utilities."""

import csv
import io
import json
from typing import Any

import rich_click as click


def _parse_field(token: str) -> str | int:
    """Field tokens made only of digits name positional (array row) fields."""
    value = token.strip()
    if value.isdigit():
        return int(value)
    return value


def _parse_fields(value: str | None) -> list[str | int] | None:
    if not value:
        return None
    return [_parse_field(part) for part in value.split(",") if part.strip()]


def _parse_pairs(values: tuple[str, ...], option: str) -> dict[str | int, str]:
    """Parse repeated ``FIELD=VALUE`` options into a dict."""
    pairs: dict[str | int, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected FIELD=VALUE, got {item!r}", param_hint=option)
        pairs[_parse_field(key)] = value
    return pairs


def _parse_lengths(values: tuple[str, ...]) -> dict[str | int, int] | None:
    lengths: dict[str | int, int] = {}
    for field, value in _parse_pairs(values, "--field-length").items():
        try:
            lengths[field] = int(value)
        except ValueError:
            raise click.BadParameter(f"{value!r} is not an integer", param_hint="--field-length") from None
    return lengths or None


def _read_rows(text: str, input_format: str) -> list[Any]:
    """Decode input text into a list of rows."""
    if input_format == "csv":
        return [dict(row) for row in csv.DictReader(io.StringIO(text))]

    if input_format == "jsonl":
        rows = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                rows.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise click.ClickException(f"Invalid JSON on line {lineno}: {e.msg}") from e
        return rows

    try:
        decoded = json.loads(text) if text.strip() else []
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e.msg}") from e
    if isinstance(decoded, dict):
        decoded = [decoded]
    if not isinstance(decoded, list):
        raise click.ClickException("JSON input must be a list of rows")
    return decoded
