"""Keypad calculator with a programmer-mode readout and a short history."""
from neoncalc.controller import Calculator
from neoncalc.evaluator import EvalError, evaluate
from neoncalc.state import CalculatorState, UnknownTokenError, transition

__all__ = [
    "Calculator",
    "CalculatorState",
    "EvalError",
    "UnknownTokenError",
    "evaluate",
    "transition",
]
