# src/bitstamp_client/connection/decimals.py

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .exceptions import ValidationError

Number = Union[int, float, str, Decimal]

# Bitstamp's limit-sell endpoints accept fewer decimals than the buy side.
BUY_LIMIT_DECIMALS = 8
SELL_LIMIT_DECIMALS = 5
MARKET_ORDER_DECIMALS = 8

ALLOWED_DECIMALS = (SELL_LIMIT_DECIMALS, BUY_LIMIT_DECIMALS)


def _as_decimal(value: Number) -> Decimal:
    """Shortest decimal spelling of ``value`` (``repr`` for floats, so 1.5e-05 -> 0.000015)."""
    try:
        if isinstance(value, float):
            return Decimal(repr(value))
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"Not a number: {value!r}") from e


def _fraction_digits(value: Number) -> int:
    exponent = _as_decimal(value).as_tuple().exponent
    if not isinstance(exponent, int):
        # nan / inf
        return 0
    return max(0, -exponent)


def to_wire(value: Number) -> str:
    """Positional form of a numeric parameter, never exponent notation."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return format(_as_decimal(value), "f")
    return str(value)


def clamp(value: Number, max_decimals: int) -> Number:
    """
    Limits ``value`` to ``max_decimals`` fractional digits.

    Values already within precision are returned untouched. Longer values are
    rendered as a fixed-point string with exactly ``max_decimals`` digits,
    rounding the exact value half away from zero.
    """
    if max_decimals not in ALLOWED_DECIMALS:
        raise ValueError(f"Unsupported precision: {max_decimals}")

    if _fraction_digits(value) <= max_decimals:
        return value

    quantum = Decimal(1).scaleb(-max_decimals)
    exact = Decimal(value) if isinstance(value, float) else _as_decimal(value)
    clamped = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return format(clamped, "f")
