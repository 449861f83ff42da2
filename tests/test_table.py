"""Tests for the Table pipeline state."""

from rowgrid.models import TableOptions
from rowgrid.table import NUMBER_FIELD, Table, describe_rows
from rowgrid.widths import Overflow


def test_describe_rows():
    assert describe_rows(0) == "0 rows in set"
    assert describe_rows(1) == "1 row in set"
    assert describe_rows(12) == "12 rows in set"


class TestTableSetup:
    """Fields, headers and widths cover the same keys."""

    def test_keys_match_after_layout(self):
        table = Table([{"a": 1, "b": 2}], TableOptions(number=True, headers={"a": "A"}))
        assert table.setup_field_lengths() is None
        assert set(table.fields) == set(table.headers) == set(table.field_lengths)
        assert table.fields[0] == NUMBER_FIELD

    def test_number_header_not_filtered(self):
        table = Table([["x"]], TableOptions(number=True, header_filter="upper"))
        assert table.headers == {NUMBER_FIELD: "number", 0: "0"}

    def test_rows_are_strings(self):
        table = Table([[1, None, 2.5]], TableOptions())
        assert table.rows == [{0: "1", 1: "", 2: "2.5"}]

    def test_rows_hold_only_fields(self):
        table = Table([{"a": 1, "b": 2}], TableOptions(fields=["a"]))
        assert table.rows == [{"a": "1"}]

    def test_explicit_fields_list_is_copied(self):
        fields = ["a"]
        Table([{"a": 1}], TableOptions(fields=fields, number=True))
        assert fields == ["a"]

    def test_render_returns_overflow(self):
        table = Table([["x" * 10] * 4], TableOptions(max_width=12))
        assert isinstance(table.render(), Overflow)

    def test_resize_disabled(self):
        table = Table([["x" * 300]], TableOptions(resize=False))
        assert table.target_width() is None
        assert len(table.render().splitlines()[0]) == 304

    def test_empty_rows_skip_layout(self):
        table = Table([], TableOptions(max_width=1))
        assert table.render() == "0 rows in set"
