from decimal import Decimal

import pytest

from bitstamp_client.connection.decimals import clamp, to_wire
from bitstamp_client.connection.exceptions import ValidationError


def test_long_value_rendered_with_exact_precision():
    assert clamp(0.123456789, 8) == "0.12345679"
    assert clamp(1.123456, 5) == "1.12346"


def test_short_value_passed_through_untouched():
    value = 0.1234567
    assert clamp(value, 8) is value
    assert clamp(100, 8) == 100
    assert isinstance(clamp(100, 8), int)
    assert clamp(2.5, 5) == 2.5


def test_exact_half_rounds_up():
    # 2**-9 is exactly 0.001953125, a true tie at eight decimals.
    assert clamp(0.001953125, 8) == "0.00195313"
    assert clamp(-0.001953125, 8) == "-0.00195313"


def test_small_value_not_in_exponent_form():
    assert clamp(1.23456789e-05, 8) == "0.00001235"


def test_string_and_decimal_inputs():
    assert clamp("0.123456789", 8) == "0.12345679"
    assert clamp(Decimal("10.1234567"), 5) == "10.12346"
    assert clamp("10.12", 5) == "10.12"


@pytest.mark.parametrize("digits", [5, 8])
@pytest.mark.parametrize("value", [0.1, 1.123456789123, 9001.999999999, -3.14159265358979, 42])
def test_clamp_is_idempotent(value, digits):
    once = clamp(value, digits)
    assert clamp(once, digits) == once


@pytest.mark.parametrize("digits", [5, 8])
def test_clamped_value_within_precision(digits):
    clamped = clamp(123.456789123456, digits)
    assert len(str(clamped).split(".")[1]) == digits


def test_unsupported_precision():
    with pytest.raises(ValueError, match="Unsupported precision"):
        clamp(1.0, 6)


def test_exponent_form_floats_counted_positionally():
    # str(0.000015) is "1.5e-05"; positionally it has six fractional digits.
    assert clamp(0.000015, 5) == "0.00002"
    # The nearest double to 0.000012345 sits just below the tie.
    assert clamp(0.000012345, 8) == "0.00001234"
    assert clamp("1.5e-05", 5) == "0.00002"


def test_exponent_form_within_precision_passed_through():
    value = 0.00005
    assert clamp(value, 5) is value


def test_to_wire_never_uses_exponent_form():
    assert to_wire(0.00005) == "0.00005"
    assert to_wire(1e-08) == "0.00000001"
    assert to_wire(Decimal("1E-7")) == "0.0000001"
    assert to_wire(100) == "100"
    assert to_wire("btcusd") == "btcusd"


def test_non_numeric_string_rejected():
    with pytest.raises(ValidationError):
        clamp("abc", 8)
