"""Tests for the filter/action registry."""

from flash_toolkit.hooks import HookRegistry


def test_apply_filters_without_callbacks_returns_value():
    hooks = HookRegistry()
    assert hooks.apply_filters("missing", 42, "ctx") == 42


def test_filters_chain_in_priority_then_registration_order():
    hooks = HookRegistry()
    hooks.add_filter("name", lambda v: v + "b")
    hooks.add_filter("name", lambda v: v + "a", priority=5)
    hooks.add_filter("name", lambda v: v + "c")
    assert hooks.apply_filters("name", "") == "abc"


def test_filters_receive_context_args():
    hooks = HookRegistry()
    seen = []

    def record(value, first, second):
        seen.append((first, second))
        return value

    hooks.add_filter("name", record)
    hooks.apply_filters("name", "v", 1, 2)
    assert seen == [(1, 2)]


def test_actions_ignore_return_values_and_count_calls():
    hooks = HookRegistry()
    calls = []
    hooks.add_action("saved", lambda *args: calls.append(args) or "ignored")

    assert hooks.do_action("saved", "a", 1) is None
    hooks.do_action("saved")

    assert calls == [("a", 1), ()]
    assert hooks.did_action("saved") == 2
    assert hooks.did_action("never") == 0


def test_remove_filter_requires_matching_priority():
    hooks = HookRegistry()

    def upper(value):
        return value.upper()

    hooks.add_filter("name", upper, priority=20)
    assert not hooks.remove_filter("name", upper)
    assert hooks.has_filter("name", upper)
    assert hooks.remove_filter("name", upper, priority=20)
    assert not hooks.has_filter("name")
    assert hooks.apply_filters("name", "x") == "x"


def test_remove_action():
    hooks = HookRegistry()
    calls = []
    callback = calls.append
    hooks.add_action("tick", callback)
    assert hooks.has_action("tick", callback)
    assert hooks.remove_action("tick", callback)
    hooks.do_action("tick", 1)
    assert calls == []
