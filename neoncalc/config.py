"""
Configuration & Constants
=========================
Central registry for the calculator's fixed settings.

The visual theme is not configured here: Streamlit reads it from
``.streamlit/config.toml`` next to ``app.py``.

Exports:
    HISTORY_LIMIT (int): Number of "expr = result" records kept.
    OPERATORS (tuple): Binary operator labels as they appear in expressions.
    KEYPAD_ROWS (tuple): Keypad layout as (label, span, variant) rows.
"""
import logging
from typing import Optional

HISTORY_LIMIT: int = 10

OPERATORS: tuple = ("+", "-", "×", "÷")
DIGITS: str = "0123456789"
DECIMAL_POINT: str = "."
MEMORY_KEYS: tuple = ("M+", "M-", "MR", "MC")

ERROR_TEXT: str = "Error"
INITIAL_DISPLAY: str = "0"

# (label, column span, variant); every row spans four columns
KEYPAD_ROWS: tuple = (
    (("C", 1, "clear"), ("÷", 1, "operator"), ("×", 1, "operator"), ("-", 1, "operator")),
    (("7", 1, None), ("8", 1, None), ("9", 1, None), ("+", 1, "operator")),
    (("4", 1, None), ("5", 1, None), ("6", 1, None), ("=", 1, "operator")),
    (("1", 1, None), ("2", 1, None), ("3", 1, None), (".", 1, "operator")),
    (("0", 2, None),),
)
KEYPAD_COLUMNS: int = 4

PAGE_TITLE: str = "Neon Calculator"
TRUNCATION_NOTE: str = "*Fractional part truncated in binary/hex"

LOG_LEVEL: int = logging.INFO
LOG_FILE: Optional[str] = None
