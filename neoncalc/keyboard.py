"""Physical keyboard keys -> calculator tokens."""
from typing import List, Optional

from neoncalc.config import DIGITS

KEY_MAP = {
    "/": "÷",
    "*": "×",
    "-": "-",
    "+": "+",
    "Enter": "=",
    "Backspace": "C",
    ".": ".",
}


def map_key(key: str) -> Optional[str]:
    """Token for a key name, or None when the key is not bound."""
    if key in KEY_MAP:
        return KEY_MAP[key]
    if len(key) == 1 and key in DIGITS:
        return key
    return None


def keys_from_text(text: str, submit: bool = False) -> List[str]:
    """
    Split typed text into key names.

    Characters become single-character keys; ``submit`` appends an
    ``Enter`` press, as when a text field is confirmed.
    """
    keys = list(text)
    if submit:
        keys.append("Enter")
    return keys
