"""Programmer-mode readout: binary and hexadecimal views of the display."""
import math
from functools import lru_cache
from typing import NamedTuple

from neoncalc.numeric import parse_number


class RadixView(NamedTuple):
    binary: str
    hex: str


ZERO_VIEW = RadixView("0", "0")


@lru_cache(maxsize=256)
def radix_view(display: str) -> RadixView:
    """
    Integer part of ``display`` in base 2 and base 16.

    The fractional part is dropped (truncation toward zero) and the sign is
    kept as a leading ``-``. Unparseable or non-finite text gives ``0``/``0``.
    """
    value = parse_number(display)
    if not math.isfinite(value):
        return ZERO_VIEW
    integer = int(value)
    sign = "-" if integer < 0 else ""
    magnitude = abs(integer)
    return RadixView(sign + format(magnitude, "b"), sign + format(magnitude, "X"))
