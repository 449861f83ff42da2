"""Tests for the row hook registry and built-in hooks."""

from types import SimpleNamespace

from rowgrid.hooks import RowHooks, default_hooks, query_hook, window_hook


class TestRowHooks:
    """Hooks run in name order, each replacing the row list."""

    def test_runs_in_name_order(self):
        calls = []
        hooks = RowHooks()

        @hooks.register("b_second")
        def second(rows, options):
            calls.append("b_second")
            return rows + [{"n": 2}]

        @hooks.register("a_first")
        def first(rows, options):
            calls.append("a_first")
            return rows + [{"n": 1}]

        result = hooks.run([], None)
        assert calls == ["a_first", "b_second"]
        assert result == [{"n": 1}, {"n": 2}]

    def test_return_value_replaces_rows(self):
        hooks = RowHooks({"drop": lambda rows, options: []})
        assert hooks.run([{"a": 1}], None) == []

    def test_generators_are_materialized(self):
        hooks = RowHooks({"gen": lambda rows, options: (r for r in rows)})
        assert hooks.run([{"a": 1}], None) == [{"a": 1}]

    def test_disabled_hooks_are_skipped(self):
        hooks = RowHooks({"drop": lambda rows, options: []})
        assert hooks.run([{"a": 1}], None, disabled=["drop"]) == [{"a": 1}]

    def test_receives_options(self):
        seen = []
        hooks = RowHooks({"spy": lambda rows, options: seen.append(options) or rows})
        options = SimpleNamespace(flag=True)
        hooks.run([], options)
        assert seen == [options]

    def test_register_and_unregister(self):
        hooks = RowHooks()
        hooks.register("x", lambda rows, options: rows)
        assert "x" in hooks
        assert len(hooks) == 1
        hooks.unregister("x")
        assert "x" not in hooks
        hooks.unregister("x")

    def test_names_sorted(self):
        hooks = RowHooks({"zeta": lambda r, o: r, "alpha": lambda r, o: r})
        assert hooks.names() == ["alpha", "zeta"]


class TestQueryHook:
    rows = [{"name": "batman"}, {"name": "robin"}, {"name": "Robert"}]

    def test_no_query(self):
        assert query_hook(self.rows, SimpleNamespace()) == self.rows

    def test_case_insensitive_regex(self):
        options = SimpleNamespace(query={"name": "^rob"})
        assert query_hook(self.rows, options) == [{"name": "robin"}, {"name": "Robert"}]

    def test_row_matching_several_fields_kept_once(self):
        rows = [{"a": "x", "b": "x"}]
        options = SimpleNamespace(query={"a": "x", "b": "x"})
        assert query_hook(rows, options) == rows


class TestWindowHook:
    rows = [{"n": i} for i in range(5)]

    def test_no_window(self):
        assert window_hook(self.rows, SimpleNamespace()) == self.rows

    def test_limit(self):
        assert window_hook(self.rows, SimpleNamespace(limit=2)) == [{"n": 0}, {"n": 1}]

    def test_offset_and_limit(self):
        assert window_hook(self.rows, SimpleNamespace(offset=3, limit=5)) == [{"n": 3}, {"n": 4}]

    def test_offset_only(self):
        assert window_hook(self.rows, SimpleNamespace(offset=4)) == [{"n": 4}]


def test_default_hooks_order():
    assert default_hooks().names() == ["query", "window"]
