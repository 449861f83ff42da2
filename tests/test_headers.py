"""Tests for header label resolution."""

import pytest

from rowgrid.filters import FilterError, MethodRef
from rowgrid.headers import resolve_headers


class TestResolveHeaders:
    def test_defaults_to_string_form(self):
        assert resolve_headers([0, 1]) == {0: "0", 1: "1"}

    def test_mapping_merges(self):
        headers = resolve_headers(["age", "weight"], {"weight": "Weight(lbs)"})
        assert headers == {"age": "age", "weight": "Weight(lbs)"}

    def test_mapping_ignores_unknown_fields(self):
        assert resolve_headers(["a"], {"zzz": "Z"}) == {"a": "a"}

    def test_sequence_labels_by_position(self):
        assert resolve_headers([0, 1, 2], ["x", "y"]) == {0: "x", 1: "y", 2: "2"}

    def test_header_filter_method_name(self):
        assert resolve_headers(["name", "age"], header_filter="capitalize") == {"name": "Name", "age": "Age"}

    def test_header_filter_after_overrides(self):
        headers = resolve_headers(["a"], {"a": "label"}, header_filter=MethodRef("upper"))
        assert headers == {"a": "LABEL"}

    def test_header_filter_callable(self):
        assert resolve_headers(["a"], header_filter=lambda h: f"<{h}>") == {"a": "<a>"}

    def test_labels_coerced_to_str(self):
        assert resolve_headers(["a"], {"a": 5}) == {"a": "5"}

    def test_unresolvable_header_filter(self):
        with pytest.raises(FilterError):
            resolve_headers(["a"], header_filter="not_a_filter")
