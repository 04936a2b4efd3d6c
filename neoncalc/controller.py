"""
Input Controller
================
Owns one ``CalculatorState`` for the lifetime of a session and is the
single place the shell sends input to. All rules live in
``neoncalc.state``; this class only holds the current state and relays
tokens, key presses and panel toggles.
"""
import logging
from typing import Optional

from neoncalc.keyboard import keys_from_text, map_key
from neoncalc.state import CalculatorState, toggle_history, toggle_programmer, transition

logger = logging.getLogger(__name__)


class Calculator:
    def __init__(self, state: Optional[CalculatorState] = None) -> None:
        self.state = state or CalculatorState()

    def submit(self, token: str) -> CalculatorState:
        self.state = transition(self.state, token)
        return self.state

    def press_key(self, key: str) -> CalculatorState:
        """Handle a physical key; unbound keys are ignored."""
        token = map_key(key)
        if token is None:
            logger.debug(f"Ignoring unbound key {key!r}")
            return self.state
        return self.submit(token)

    def type_text(self, text: str, submit: bool = True) -> CalculatorState:
        """Press every character of ``text`` in order, then Enter if ``submit``."""
        for key in keys_from_text(text, submit=submit):
            self.press_key(key)
        return self.state

    def toggle_programmer(self) -> CalculatorState:
        self.state = toggle_programmer(self.state)
        logger.debug(f"Programmer mode {'shown' if self.state.show_programmer else 'hidden'}")
        return self.state

    def toggle_history(self) -> CalculatorState:
        self.state = toggle_history(self.state)
        logger.debug(f"History {'shown' if self.state.show_history else 'hidden'}")
        return self.state
