"""Local sanity checks run before an order or history request is signed."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from bitstamp_client.connection.exceptions import ValidationError

TRANSACTION_WINDOWS = ("minute", "hour", "day")
SORT_DIRECTIONS = ("asc", "desc")
MAX_USER_TRANSACTIONS = 1000


def _as_number(name: str, value: Any) -> Decimal:
    """Prices may arrive as str, int, float or Decimal; compare them numerically."""

    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"{name} is not a number: {value!r}") from e
    if number.is_nan():
        raise ValidationError(f"{name} is not a number: {value!r}")
    return number


def check_buy_limit(price: Any, limit_price: Any) -> None:
    """A buy's follow-up sell at ``limit_price`` must be above the buy price."""

    if _as_number("limit_price", limit_price) <= _as_number("price", price):
        raise ValidationError("limit_price <= price")


def check_sell_limit(price: Any, limit_price: Any) -> None:
    """A sell's follow-up buy at ``limit_price`` must be below the sell price."""

    if _as_number("limit_price", limit_price) >= _as_number("price", price):
        raise ValidationError("limit_price >= price")


def check_currency_pair(currency_pair: str) -> None:
    if not isinstance(currency_pair, str) or len(currency_pair) != 6 or not currency_pair.isalpha():
        raise ValidationError(f"Invalid currency pair: {currency_pair!r}")


def check_transaction_window(time: str) -> None:
    if time not in TRANSACTION_WINDOWS:
        raise ValidationError(
            f"time must be one of {', '.join(TRANSACTION_WINDOWS)}; got {time!r}"
        )


def check_user_transactions_page(offset: int, limit: int, sort: str) -> None:
    if offset < 0:
        raise ValidationError("offset must not be negative")
    if limit < 1 or limit > MAX_USER_TRANSACTIONS:
        raise ValidationError(f"limit must be between 1 and {MAX_USER_TRANSACTIONS}")
    if sort not in SORT_DIRECTIONS:
        raise ValidationError(f"sort must be 'asc' or 'desc'; got {sort!r}")
