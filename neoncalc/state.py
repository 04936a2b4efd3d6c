"""
Calculator state and its transition rules.

``CalculatorState`` is an immutable record; ``transition(state, token)``
returns the next state. The rules are kept in one ordered decision table,
``RULES``: the first rule whose guard matches the (state, token) pair
decides the outcome.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Tuple

from neoncalc import config
from neoncalc.evaluator import EvalError, evaluate
from neoncalc.numeric import format_number, parse_number
from neoncalc.radix import RadixView, radix_view

logger = logging.getLogger(__name__)

TOKENS = frozenset(
    tuple(config.DIGITS)
    + config.OPERATORS
    + config.MEMORY_KEYS
    + (config.DECIMAL_POINT, "=", "C")
)

_OPERATOR_SPLIT = re.compile("[" + re.escape("".join(config.OPERATORS)) + "]")


class UnknownTokenError(ValueError):
    pass


@dataclass(frozen=True)
class CalculatorState:
    """Everything one calculator session knows."""
    expression: str = ""
    display: str = config.INITIAL_DISPLAY
    memory: float = 0.0
    history: Tuple[str, ...] = ()
    show_programmer: bool = False
    show_history: bool = False

    @property
    def radix(self) -> RadixView:
        return radix_view(self.display)

    @property
    def binary(self) -> str:
        return self.radix.binary

    @property
    def hex(self) -> str:
        return self.radix.hex

    @property
    def radix_truncated(self) -> bool:
        """True when the display has a fractional part the radix views drop."""
        return config.DECIMAL_POINT in self.display


def is_operator(token: str) -> bool:
    return token in config.OPERATORS


def open_operand(expression: str) -> str:
    """The operand currently being typed (text after the last operator)."""
    return _OPERATOR_SPLIT.split(expression)[-1]


# ---------- ACTIONS ----------
def _clear(state: CalculatorState, token: str) -> CalculatorState:
    return replace(state, expression="", display=config.INITIAL_DISPLAY)


def _evaluate(state: CalculatorState, token: str) -> CalculatorState:
    try:
        value = evaluate(state.expression)
    except EvalError as e:
        logger.info(f"Could not evaluate {state.expression!r}: {e}")
        return replace(state, expression="", display=config.ERROR_TEXT)

    result = format_number(value)
    entry = f"{state.expression} = {result}"
    history = ((entry,) + state.history)[:config.HISTORY_LIMIT]
    logger.debug(f"History entry added: {entry}")
    return replace(state, expression=result, display=result, history=history)


def _memory_add(state: CalculatorState, token: str) -> CalculatorState:
    memory = state.memory + parse_number(state.display)
    logger.debug(f"Memory {state.memory!r} -> {memory!r}")
    return replace(state, memory=memory)


def _memory_subtract(state: CalculatorState, token: str) -> CalculatorState:
    memory = state.memory - parse_number(state.display)
    logger.debug(f"Memory {state.memory!r} -> {memory!r}")
    return replace(state, memory=memory)


def _memory_recall(state: CalculatorState, token: str) -> CalculatorState:
    # Replaces whatever was being typed.
    recalled = format_number(state.memory)
    return replace(state, expression=recalled, display=recalled)


def _memory_clear(state: CalculatorState, token: str) -> CalculatorState:
    return replace(state, memory=0.0)


def _ignore(state: CalculatorState, token: str) -> CalculatorState:
    return state


def _replace_operator(state: CalculatorState, token: str) -> CalculatorState:
    return replace(state, expression=state.expression[:-1] + token, display=token)


def _append(state: CalculatorState, token: str) -> CalculatorState:
    return replace(state, expression=state.expression + token, display=token)


# ---------- DECISION TABLE ----------
Guard = Callable[[CalculatorState, str], bool]
Action = Callable[[CalculatorState, str], CalculatorState]


def _is(expected: str) -> Guard:
    return lambda state, token: token == expected


def _operator_on_empty(state: CalculatorState, token: str) -> bool:
    return is_operator(token) and not state.expression


def _operator_after_operator(state: CalculatorState, token: str) -> bool:
    return is_operator(token) and is_operator(state.expression[-1:])


def _second_decimal_point(state: CalculatorState, token: str) -> bool:
    return token == config.DECIMAL_POINT and config.DECIMAL_POINT in open_operand(state.expression)


def _always(state: CalculatorState, token: str) -> bool:
    return True


RULES: Tuple[Tuple[str, Guard, Action], ...] = (
    ("clear", _is("C"), _clear),
    ("evaluate", _is("="), _evaluate),
    ("memory add", _is("M+"), _memory_add),
    ("memory subtract", _is("M-"), _memory_subtract),
    ("memory recall", _is("MR"), _memory_recall),
    ("memory clear", _is("MC"), _memory_clear),
    ("operator on empty expression", _operator_on_empty, _ignore),
    ("replace trailing operator", _operator_after_operator, _replace_operator),
    ("second decimal point", _second_decimal_point, _ignore),
    ("append", _always, _append),
)


def transition(state: CalculatorState, token: str) -> CalculatorState:
    """Apply one keypad token and return the resulting state."""
    if token not in TOKENS:
        raise UnknownTokenError(f"Unknown calculator token: {token!r}")
    name, action = next(
        (name, action) for name, guard, action in RULES if guard(state, token)
    )
    logger.debug(f"{token!r}: {name}")
    return action(state, token)


def toggle_programmer(state: CalculatorState) -> CalculatorState:
    return replace(state, show_programmer=not state.show_programmer)


def toggle_history(state: CalculatorState) -> CalculatorState:
    return replace(state, show_history=not state.show_history)
