"""Render command."""

import json

import rich_click as click

from ..config import load_settings, resolve_filter_classes
from ..hooks import default_hooks
from ..models.options import TableOptions
from ..render import render as render_rows
from ._helpers import _parse_fields, _parse_lengths, _parse_pairs, _read_rows


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--input-format",
    "-i",
    type=click.Choice(["json", "jsonl", "csv"]),
    default="json",
    help="Input format",
)
@click.option("--fields", "-f", help="Comma-separated fields, in display order")
@click.option("--header", "headers", multiple=True, help="Header label override (FIELD=LABEL)")
@click.option("--field-length", "field_lengths", multiple=True, help="Fixed column width (FIELD=N)")
@click.option("--max-width", "-w", type=int, help="Maximum table width (default: view.width)")
@click.option("--number", "-n", is_flag=True, help="Prepend a row number column")
@click.option("--change-field", "change_fields", multiple=True, help="Rename or append a field (OLD=NEW)")
@click.option("--filter", "filters", multiple=True, help="Named filter for a field (FIELD=NAME)")
@click.option("--header-filter", help="Named filter applied to every header")
@click.option("--filter-values", is_flag=True, help="Filter values by their type (see filter_classes)")
@click.option("--vertical", "-V", is_flag=True, help="Render one field per line")
@click.option("--all-fields", "-a", is_flag=True, help="Use keys from every row, not just the first")
@click.option("--no-description", is_flag=True, help="Omit the row count line")
@click.option("--no-escape", is_flag=True, help="Keep tabs and newlines in cells")
@click.option("--return-rows", is_flag=True, help="Print normalized rows as JSON instead of a table")
@click.option("--disable-hook", "disabled_hooks", multiple=True, help="Skip a row hook (query, window)")
@click.option("--query", "-q", "queries", multiple=True, help="Keep rows where FIELD matches REGEX (FIELD=REGEX)")
@click.option("--offset", type=int, help="Skip the first N rows")
@click.option("--limit", "-l", type=int, help="Show at most N rows")
@click.option("--length", type=click.Choice(["chars", "cells"]), help="How string width is measured")
def render(
    source,
    input_format: str,
    fields: str | None,
    headers: tuple[str, ...],
    field_lengths: tuple[str, ...],
    max_width: int | None,
    number: bool,
    change_fields: tuple[str, ...],
    filters: tuple[str, ...],
    header_filter: str | None,
    filter_values: bool,
    vertical: bool,
    all_fields: bool,
    no_description: bool,
    no_escape: bool,
    return_rows: bool,
    disabled_hooks: tuple[str, ...],
    queries: tuple[str, ...],
    offset: int | None,
    limit: int | None,
    length: str | None,
):
    """
    Render rows from a file (or stdin) as a table.

    Input is a JSON list of arrays or objects, JSON lines, or CSV.

    Examples:
        rowgrid render data.json
        rowgrid render -i csv people.csv --fields name,age --max-width 60
        cat rows.jsonl | rowgrid render -i jsonl -q name=rob --limit 5
    """
    rows = _read_rows(source.read(), input_format)

    try:
        settings = load_settings()
        default_classes = resolve_filter_classes(settings.filter_classes)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    options: dict = {
        "fields": _parse_fields(fields),
        "field_lengths": _parse_lengths(field_lengths),
        "number": number,
        "change_fields": _parse_pairs(change_fields, "--change-field"),
        "filters": _parse_pairs(filters, "--filter"),
        "header_filter": header_filter,
        "filter_values": filter_values,
        "default_filter_classes": default_classes,
        "vertical": vertical,
        "all_fields": all_fields,
        "description": settings.table.description and not no_description,
        "return_rows": return_rows,
        "delete_callbacks": list(disabled_hooks),
        "hooks": default_hooks(),
        "length": length or settings.table.length,
    }
    if headers:
        options["headers"] = _parse_pairs(headers, "--header")
    if max_width is not None:
        options["max_width"] = max_width
    if queries:
        options["query"] = _parse_pairs(queries, "--query")
    if offset is not None:
        options["offset"] = offset
    if limit is not None:
        options["limit"] = limit
    if no_escape or not settings.table.escape_special_chars:
        options["escape_special_chars"] = False

    result = render_rows(rows, TableOptions(**options))

    if return_rows:
        click.echo(json.dumps(result, indent=2, default=str))
    else:
        click.echo(result)

