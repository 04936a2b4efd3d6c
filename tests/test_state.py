"""
Tests for calculator state transitions.
"""

import dataclasses
import logging
import math
from functools import reduce

import pytest

from neoncalc.state import (
    RULES,
    TOKENS,
    CalculatorState,
    UnknownTokenError,
    open_operand,
    toggle_history,
    toggle_programmer,
    transition,
)


def run(tokens, state=None):
    return reduce(transition, tokens, state or CalculatorState())


def test_initial_state():
    state = CalculatorState()
    assert state.expression == ""
    assert state.display == "0"
    assert state.memory == 0.0
    assert state.history == ()
    assert not state.show_programmer
    assert not state.show_history


def test_simple_addition():
    """Test that 7 + 3 = shows 10 and records it."""
    state = run(["7", "+", "3", "="])
    assert state.display == "10"
    assert state.expression == "10"
    assert state.history[0] == "7+3 = 10"


def test_operator_replacement_before_evaluation():
    """Test that 5 + ÷ 2 = evaluates 5÷2."""
    state = run(["5", "+", "÷", "2", "="])
    assert state.display == "2.5"
    assert state.history[0] == "5÷2 = 2.5"


def test_consecutive_operators_replace():
    state = run(["5", "+", "×"])
    assert state.expression == "5×"
    assert state.display == "×"

    state = run(["5", "-", "+"])
    assert state.expression == "5+"


def test_division_by_zero_shows_infinity():
    state = run(["9", "÷", "0", "="])
    assert state.display == "Infinity"
    assert state.expression == "Infinity"
    assert state.history[0] == "9÷0 = Infinity"


def test_operator_on_empty_expression_is_ignored():
    assert run(["×"]) == CalculatorState()
    assert run(["+", "-", "÷"]) == CalculatorState()


def test_equals_on_empty_expression_is_error():
    """Test that + = on an empty expression ends in Error."""
    state = run(["+", "="])
    assert state.display == "Error"
    assert state.expression == ""
    assert state.history == ()


def test_error_leaves_history_untouched():
    state = run(["7", "+", "3", "=", "+", "="])
    assert state.display == "Error"
    assert state.expression == ""
    assert state.history == ("7+3 = 10",)


def test_input_resumes_after_error():
    state = run(["+", "=", "4", "×", "2", "="])
    assert state.display == "8"
    assert state.history[0] == "4×2 = 8"


def test_evaluation_failure_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="neoncalc")
    run(["1", "+", "="])
    assert "Could not evaluate '1+'" in caplog.text


def test_second_decimal_point_in_operand_is_ignored():
    state = run(["1", ".", "5"])
    assert run(["."], state).expression == "1.5"
    assert run([".", "."], run(["1"])).expression == "1."


def test_decimal_point_allowed_in_each_operand():
    state = run(["1", ".", "5", "+", "2", "."])
    assert state.expression == "1.5+2."
    assert run(["."], state).expression == "1.5+2."


def test_leading_decimal_point():
    state = run([".", "1", "+", ".", "2", "="])
    assert state.display == "0.30000000000000004"


def test_decimal_point_after_fractional_result_is_ignored():
    state = run(["5", "÷", "2", "=", "."])
    assert state.expression == "2.5"


def test_precedence_is_standard():
    state = run(["2", "+", "3", "×", "4", "="])
    assert state.display == "14"


def test_result_continues_as_expression():
    state = run(["7", "+", "3", "=", "×", "2", "="])
    assert state.display == "20"
    assert state.history == ("10×2 = 20", "7+3 = 10")


def test_digit_after_result_appends():
    state = run(["7", "+", "3", "=", "5"])
    assert state.expression == "105"
    assert state.display == "5"


def test_display_mirrors_last_token():
    state = run(["1", "2", "+"])
    assert state.expression == "12+"
    assert state.display == "+"


def test_radix_views_follow_last_digit_before_evaluation():
    """Test that binary/hex track the display, not the whole expression."""
    state = run(["1", "0"])
    assert state.display == "0"
    assert (state.binary, state.hex) == ("0", "0")
    state = run(["="], state)
    assert (state.binary, state.hex) == ("1010", "A")


def test_last_rule_matches_everything():
    """Test that the decision table ends with a catch-all append rule."""
    name, guard, _ = RULES[-1]
    assert name == "append"
    assert all(guard(CalculatorState(), token) for token in TOKENS)


@pytest.mark.parametrize(
    "tokens",
    [[], ["7"], ["7", "+"], ["7", "+", "3", "="], ["+", "="], ["5", "M+", "MR"]],
)
def test_clear_always_resets(tokens):
    state = run(tokens + ["C"])
    assert state.display == "0"
    assert state.expression == ""


def test_clear_keeps_memory_and_history():
    state = run(["7", "+", "3", "=", "M+", "C"])
    assert state.memory == 10.0
    assert state.history == ("7+3 = 10",)


def test_history_is_capped_newest_first():
    state = CalculatorState()
    for i in range(1, 12):
        state = run(["C"] + list(str(i)) + ["+", "0", "="], state)
    assert len(state.history) == 10
    assert state.history[0] == "11+0 = 11"
    assert state.history[-1] == "2+0 = 2"
    assert "1+0 = 1" not in state.history


def test_memory_add_subtract_recall_clear():
    state = run(["5", "M+"])
    assert state.memory == 5.0
    assert state.display == "5"
    assert state.expression == "5"

    state = run(["C", "3", "M-"], state)
    assert state.memory == 2.0

    state = run(["MR"], state)
    assert state.display == "2"
    assert state.expression == "2"

    state = run(["MC"], state)
    assert state.memory == 0.0
    assert run(["MR"], state).display == "0"


def test_memory_recall_overwrites_expression():
    state = run(["5", "M+", "C", "1", "+", "MR"])
    assert state.expression == "5"
    assert state.display == "5"


def test_negative_memory_can_start_expression():
    state = run(["5", "M-", "C", "MR", "+", "3", "="])
    assert state.history[0] == "-5+3 = -2"
    assert state.display == "-2"


def test_memory_add_of_non_number_is_nan():
    state = run(["+", "=", "M+"])
    assert math.isnan(state.memory)
    assert run(["MR"], state).display == "NaN"


def test_radix_views_follow_display():
    state = run(["1", "0", "÷", "4", "="])
    assert state.display == "2.5"
    assert state.binary == "10"
    assert state.hex == "2"
    assert state.radix_truncated

    state = run(["C"], state)
    assert state.binary == "0"
    assert not state.radix_truncated


@pytest.mark.parametrize("token", ["x", "*", "/", "", "Enter", "10", "M"])
def test_unknown_token_raises(token):
    with pytest.raises(UnknownTokenError):
        transition(CalculatorState(), token)


def test_transition_does_not_mutate():
    state = CalculatorState()
    transition(state, "7")
    assert state.expression == ""
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.display = "1"


def test_panel_toggles_leave_calculator_fields_alone():
    state = run(["7", "+"])
    toggled = toggle_programmer(toggle_history(state))
    assert toggled.show_programmer and toggled.show_history
    assert toggled.expression == state.expression
    assert toggled.display == state.display
    assert not toggle_programmer(toggled).show_programmer


def test_open_operand():
    assert open_operand("") == ""
    assert open_operand("12.5+3") == "3"
    assert open_operand("4×") == ""
    assert open_operand("1e-7") == "7"
