from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

BALANCE_CURRENCIES = ("usd", "btc", "eur", "xrp", "bch", "eth", "ltc")

FEE_PAIRS = (
    "bchbtc",
    "bcheur",
    "bchusd",
    "btceur",
    "btcusd",
    "ethbtc",
    "etheur",
    "ethusd",
    "eurusd",
    "ltcbtc",
    "ltceur",
    "ltcusd",
    "xrpbtc",
    "xrpeur",
    "xrpusd",
)


@dataclass
class Tick:
    last: float
    high: float
    low: float
    vwap: float
    volume: float
    bid: float
    ask: float
    timestamp: int
    open: float


@dataclass
class Balance:
    """Per-currency totals plus the customer's per-pair trading fee percentages.

    Each mapping is keyed by the lowercase currency (or pair) code. ``as_dict``
    returns the flat ``usd_balance`` / ``btcusd_fee`` layout Bitstamp uses.
    """

    balance: Dict[str, float] = field(default_factory=dict)
    reserved: Dict[str, float] = field(default_factory=dict)
    available: Dict[str, float] = field(default_factory=dict)
    fees: Dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, float]:
        flat: Dict[str, float] = {}
        for suffix, values in (
            ("balance", self.balance),
            ("reserved", self.reserved),
            ("available", self.available),
        ):
            for currency, amount in values.items():
                flat[f"{currency}_{suffix}"] = amount
        for pair, fee in self.fees.items():
            flat[f"{pair}_fee"] = fee
        return flat


@dataclass
class Order:
    id: int
    datetime: Optional[str]
    type: Any
    price: float
    amount: float


@dataclass
class Transaction:
    datetime: Optional[str]
    id: Any
    type: Any
    base_currency: str
    quote_currency: str
    base_amount: float
    quote_amount: float
    rate: float
    fee: Optional[float] = None
    order_id: Any = None

    @property
    def rate_label(self) -> str:
        return f"{self.base_currency}_{self.quote_currency}"

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "datetime": self.datetime,
            "id": self.id,
            "type": self.type,
        }
        if self.fee is not None:
            data["fee"] = self.fee
        if self.order_id is not None:
            data["order_id"] = self.order_id
        data[self.base_currency] = self.base_amount
        data[self.quote_currency] = self.quote_amount
        data[self.rate_label] = self.rate
        return data
