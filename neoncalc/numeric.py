"""
Number <-> text conversions shared by the controller and the radix views.

Results are rendered the way a browser prints a double (``10``, ``2.5``,
``1e+21``, ``Infinity``), and display text is read back with a lenient
prefix parse, so ``"Error"`` or a lone operator reads as NaN.
"""
import math
import re
from decimal import Decimal

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# positional notation is used for decimal exponents in (-6, 21]
_MAX_POSITIONAL = 21
_MIN_POSITIONAL = -6


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, browser style."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = k + exponent
    if k <= n <= _MAX_POSITIONAL:
        text = digits + "0" * (n - k)
    elif 0 < n <= _MAX_POSITIONAL:
        text = digits[:n] + "." + digits[n:]
    elif _MIN_POSITIONAL < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def parse_number(text: str) -> float:
    """Read the leading numeric literal of ``text``; NaN when there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group())
