"""Typed views over successful Bitstamp payloads.

Bitstamp sends every number as a string. The coercers below parse them and
fall back to ``nan`` for anything missing or unparsable rather than raising,
so a half-populated payload still produces a result the caller can inspect.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping, Union

from bitstamp_client.models import (
    BALANCE_CURRENCIES,
    FEE_PAIRS,
    Balance,
    Order,
    Tick,
    Transaction,
)

TICK_FLOAT_FIELDS = ("last", "high", "low", "vwap", "volume", "bid", "ask", "open")


def to_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_int(value: Any) -> Union[int, float]:
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    parsed = to_float(value)
    if math.isfinite(parsed):
        return int(parsed)
    return math.nan


def coerce_tick(payload: Mapping[str, Any]) -> Tick:
    fields: Dict[str, Any] = {name: to_float(payload.get(name)) for name in TICK_FLOAT_FIELDS}
    fields["timestamp"] = to_int(payload.get("timestamp"))
    return Tick(**fields)


def coerce_balance(payload: Mapping[str, Any]) -> Balance:
    return Balance(
        balance={c: to_float(payload.get(f"{c}_balance")) for c in BALANCE_CURRENCIES},
        reserved={c: to_float(payload.get(f"{c}_reserved")) for c in BALANCE_CURRENCIES},
        available={c: to_float(payload.get(f"{c}_available")) for c in BALANCE_CURRENCIES},
        fees={pair: to_float(payload.get(f"{pair}_fee")) for pair in FEE_PAIRS},
    )


def coerce_order(payload: Mapping[str, Any]) -> Order:
    return Order(
        id=to_int(payload.get("id")),
        datetime=payload.get("datetime"),
        type=payload.get("type"),
        price=to_float(payload.get("price")),
        amount=to_float(payload.get("amount")),
    )


def split_currency_pair(currency_pair: str) -> tuple[str, str]:
    """Split a 6-character pair code such as ``btcusd`` into ``("btc", "usd")``."""

    return currency_pair[:3], currency_pair[3:]


def coerce_transaction(currency_pair: str, entry: Mapping[str, Any]) -> Transaction:
    base, quote = split_currency_pair(currency_pair)

    fee = entry.get("fee")
    order_id = entry.get("order_id")

    return Transaction(
        datetime=entry.get("datetime"),
        id=entry.get("id"),
        type=entry.get("type"),
        base_currency=base,
        quote_currency=quote,
        base_amount=to_float(entry.get(base)),
        quote_amount=to_float(entry.get(quote)),
        rate=to_float(entry.get(f"{base}_{quote}")),
        fee=to_float(fee) if fee else None,
        order_id=order_id if order_id else None,
    )


def coerce_user_transactions(
    currency_pair: str, payload: Iterable[Mapping[str, Any]]
) -> List[Transaction]:
    return [coerce_transaction(currency_pair, entry) for entry in payload]
