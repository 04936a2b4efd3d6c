"""
Tests for the binary/hex programmer readout.
"""

import pytest

from neoncalc.radix import ZERO_VIEW, RadixView, radix_view


@pytest.mark.parametrize(
    "display, binary, hexadecimal",
    [
        ("-10.7", "-1010", "-A"),
        ("255", "11111111", "FF"),
        ("3.99", "11", "3"),
        ("0", "0", "0"),
        ("-0.5", "0", "0"),
    ],
)
def test_radix_view(display, binary, hexadecimal):
    """Test that the integer part is rendered with its sign and uppercase hex digits."""
    assert radix_view(display) == RadixView(binary, hexadecimal)


@pytest.mark.parametrize("display", ["Error", "Infinity", "-Infinity", "NaN", "+", "÷"])
def test_radix_view_resets_for_non_numbers(display):
    """Test that unparseable or non-finite displays show 0."""
    assert radix_view(display) == ZERO_VIEW


def test_radix_view_of_large_integer_is_exact():
    """Test that integers beyond 2**53 keep every digit."""
    view = radix_view("1e+21")
    assert view.hex == "3635C9ADC5DEA00000"
    assert int(view.binary, 2) == 10 ** 21
