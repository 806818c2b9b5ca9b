"""Tests for the bundled condition expression evaluator."""

import pytest

from trellis.conditions import evaluate_condition, is_truthy, resolve_key
from trellis.errors import ConditionError
from trellis.model.state import RuntimeState


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _state(data: dict | None = None) -> RuntimeState:
    return RuntimeState(initial=data)


# ---------------------------------------------------------------------------
# evaluate_condition
# ---------------------------------------------------------------------------


class TestEmptyCondition:
    def test_empty_string_returns_true(self):
        assert evaluate_condition("", _state()) is True

    def test_whitespace_only_returns_true(self):
        assert evaluate_condition("   ", _state()) is True


class TestBareKeys:
    def test_true_flag(self):
        assert evaluate_condition("hovering", _state({"hovering": True})) is True

    def test_false_flag(self):
        assert evaluate_condition("hovering", _state({"hovering": False})) is False

    def test_missing_key_is_false(self):
        assert evaluate_condition("hovering", _state()) is False

    @pytest.mark.parametrize("raw", ["false", "0", "", "no", "off", "False"])
    def test_falsy_strings(self, raw):
        assert evaluate_condition("flag", _state({"flag": raw})) is False

    @pytest.mark.parametrize("raw", ["true", "1", "yes", "anything"])
    def test_truthy_strings(self, raw):
        assert evaluate_condition("flag", _state({"flag": raw})) is True

    def test_negation(self):
        assert evaluate_condition("!disabled", _state({"disabled": False})) is True
        assert evaluate_condition("!disabled", _state({"disabled": True})) is False

    def test_negation_of_missing_key(self):
        assert evaluate_condition("!disabled", _state()) is True


class TestComparisons:
    def test_equals(self):
        assert evaluate_condition("tab=settings", _state({"tab": "settings"})) is True

    def test_equals_mismatch(self):
        assert evaluate_condition("tab=settings", _state({"tab": "build"})) is False

    def test_not_equals(self):
        assert evaluate_condition("tab!=settings", _state({"tab": "build"})) is True

    def test_not_equals_match(self):
        assert evaluate_condition("tab!=settings", _state({"tab": "settings"})) is False

    def test_whitespace_around_operator(self):
        assert evaluate_condition("tab = settings", _state({"tab": "settings"})) is True

    def test_numbers_compare_as_strings(self):
        assert evaluate_condition("count=3", _state({"count": 3})) is True

    def test_bools_compare_lowercase(self):
        assert evaluate_condition("visible=true", _state({"visible": True})) is True

    def test_missing_key_equals_empty(self):
        assert evaluate_condition("tab=", _state()) is True
        assert evaluate_condition("tab!=", _state()) is False


class TestConjunction:
    def test_all_true(self):
        state = _state({"hovering": True, "tab": "build"})
        assert evaluate_condition("hovering && tab=build", state) is True

    def test_one_false(self):
        state = _state({"hovering": True, "tab": "save"})
        assert evaluate_condition("hovering && tab=build", state) is False


class TestStateTypes:
    def test_plain_dict(self):
        assert evaluate_condition("hovering", {"hovering": True}) is True

    def test_none_state(self):
        assert evaluate_condition("hovering", None) is False
        assert evaluate_condition("!hovering", None) is True

    def test_resolve_key(self):
        assert resolve_key("a", _state({"a": 1})) == 1
        assert resolve_key("a", None) is None

    def test_is_truthy(self):
        assert is_truthy(True) is True
        assert is_truthy(None) is False
        assert is_truthy(0) is False


class TestErrors:
    def test_missing_key_before_operator(self):
        with pytest.raises(ConditionError):
            evaluate_condition("=settings", _state())

    def test_key_with_spaces(self):
        with pytest.raises(ConditionError):
            evaluate_condition("is hovering", _state())

    def test_empty_clause(self):
        with pytest.raises(ConditionError):
            evaluate_condition("hovering && ", _state())

    def test_condition_error_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate_condition("!", _state())


# ---------------------------------------------------------------------------
# RuntimeState
# ---------------------------------------------------------------------------


class TestRuntimeState:
    def test_set_and_get(self):
        state = RuntimeState()
        state.set("hovering", True)
        assert state.get("hovering") is True
        assert "hovering" in state

    def test_get_default(self):
        assert RuntimeState().get("missing", "x") == "x"

    def test_apply_updates_merges(self):
        state = RuntimeState({"a": 1, "b": 1})
        state.apply_updates({"b": 2, "c": 3})
        assert state.get("a") == 1
        assert state.get("b") == 2
        assert "c" in state

    def test_repr(self):
        assert "hovering" in repr(RuntimeState({"hovering": True}))
