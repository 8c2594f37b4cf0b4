# src/bitstamp_client/connection/rest_client.py

import logging
import urllib.parse
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from bitstamp_client.coercion import (
    coerce_balance,
    coerce_order,
    coerce_tick,
    coerce_user_transactions,
)
from bitstamp_client.config import BITSTAMP_API_URL, DEFAULT_USER_AGENT, ClientConfig
from bitstamp_client.credentials import Credentials
from bitstamp_client.logging_config import structured_log_extra
from bitstamp_client.models import Balance, Order, Tick, Transaction
from bitstamp_client.orders import (
    check_buy_limit,
    check_currency_pair,
    check_sell_limit,
    check_transaction_window,
    check_user_transactions_page,
)
from .decimals import (
    BUY_LIMIT_DECIMALS,
    MARKET_ORDER_DECIMALS,
    SELL_LIMIT_DECIMALS,
    clamp,
    to_wire,
)
from .envelope import parse_envelope
from .exceptions import CredentialError, TransportError
from .nonce import NonceGenerator
from .signer import sign

logger = logging.getLogger(__name__)

ParamValue = Union[str, int, float, Decimal]


class BitstampRESTClient:
    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        api_url: str = BITSTAMP_API_URL,
        request_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_url = api_url.rstrip("/")
        self.request_timeout = request_timeout
        self.credentials = credentials

        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

        self.nonce_generator = nonce_generator or NonceGenerator()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        credentials: Optional[Credentials] = None,
        session: Optional[requests.Session] = None,
    ) -> "BitstampRESTClient":
        return cls(
            credentials=credentials,
            api_url=config.api_url,
            request_timeout=config.request_timeout,
            session=session,
            user_agent=config.user_agent,
        )

    def _get_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.api_url}{path}"

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Reads the whole body before classifying it so the connection can be
        reused even when the status code already tells us the call failed.
        """
        try:
            body = response.content
        finally:
            response.close()

        logger.debug(
            "Bitstamp response received",
            extra=structured_log_extra(
                event="bitstamp_response",
                status_code=response.status_code,
            ),
        )
        return parse_envelope(body, response.status_code)

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self._get_url(path)
        logger.debug(
            "Bitstamp request dispatched",
            extra=structured_log_extra(
                event="bitstamp_request",
                method=method.upper(),
                path=path.split("?", 1)[0],
            ),
        )

        try:
            if method == "get":
                response = self.session.get(url, timeout=self.request_timeout, **kwargs)
            elif method == "post":
                response = self.session.post(url, timeout=self.request_timeout, **kwargs)
            else:
                raise ValueError(f"Unsupported method: {method}")
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Network Error: {e}") from e

        return self._handle_response(response)

    def call_public(self, path: str) -> Any:
        """Makes an unauthenticated GET request to a public Bitstamp endpoint."""
        return self._send("get", path)

    def call_private(self, path: str, params: Optional[Mapping[str, ParamValue]] = None) -> Any:
        """
        Makes a signed POST request to a private Bitstamp endpoint.

        The nonce is generated once, signed, and sent as-is alongside ``key`` and
        ``signature``. ``params`` must not contain those three names.
        """
        credentials = self.credentials
        if credentials is None or not credentials.is_complete:
            raise CredentialError(
                "API key, secret and customer ID are required for private endpoints."
            )

        nonce = self.nonce_generator.generate()
        signature = sign(nonce, credentials)

        data: Dict[str, ParamValue] = {
            name: to_wire(value) for name, value in (params or {}).items()
        }
        data.update({"key": credentials.api_key, "signature": signature, "nonce": nonce})
        body = urllib.parse.urlencode(data).encode("ascii")

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Content-Length": str(len(body)),
            "Accept": "application/json",
        }
        return self._send("post", path, data=body, headers=headers)

    # --- Public Endpoints ---

    def order_book(self, currency_pair: str) -> Any:
        return self.call_public(f"/v2/order_book/{currency_pair}/")

    def ticker(self, currency_pair: str) -> Tick:
        """Last 24 hours of trading for ``currency_pair``."""
        return coerce_tick(self.call_public(f"/v2/ticker/{currency_pair}/"))

    def hourly_ticker(self, currency_pair: str) -> Tick:
        """Same fields as :meth:`ticker`, computed over the last hour."""
        return coerce_tick(self.call_public(f"/v2/ticker_hour/{currency_pair}/"))

    def transactions(self, currency_pair: str, time: str = "hour") -> Any:
        """
        Public trades for ``currency_pair`` over the last ``minute``, ``hour`` or ``day``.
        """
        check_transaction_window(time)
        query = urllib.parse.urlencode({"time": time})
        return self.call_public(f"/v2/transactions/{currency_pair}/?{query}")

    # --- Private Endpoints ---

    def account_balance(self) -> Balance:
        return coerce_balance(self.call_private("/v2/balance/"))

    def all_open_orders(self) -> Any:
        return self.call_private("/v2/open_orders/all/")

    def open_orders(self, currency_pair: str) -> Any:
        return self.call_private(f"/v2/open_orders/{currency_pair}/")

    def buy_limit_order(
        self,
        currency_pair: str,
        amount: ParamValue,
        price: ParamValue,
        limit_price: ParamValue,
    ) -> Order:
        """
        Places a buy order at ``price``. Once it executes, Bitstamp places a sell
        order at ``limit_price``, which must therefore be above ``price``.
        """
        check_buy_limit(price, limit_price)
        params = {
            "amount": clamp(amount, BUY_LIMIT_DECIMALS),
            "price": clamp(price, BUY_LIMIT_DECIMALS),
            "limit_price": clamp(limit_price, BUY_LIMIT_DECIMALS),
        }
        return coerce_order(self.call_private(f"/v2/buy/{currency_pair}/", params))

    def sell_limit_order(
        self,
        currency_pair: str,
        amount: ParamValue,
        price: ParamValue,
        limit_price: ParamValue,
    ) -> Order:
        """
        Places a sell order at ``price``. Once it executes, Bitstamp places a buy
        order at ``limit_price``, which must therefore be below ``price``.
        """
        check_sell_limit(price, limit_price)
        params = {
            "amount": clamp(amount, SELL_LIMIT_DECIMALS),
            "price": clamp(price, SELL_LIMIT_DECIMALS),
            "limit_price": clamp(limit_price, SELL_LIMIT_DECIMALS),
        }
        return coerce_order(self.call_private(f"/v2/sell/{currency_pair}/", params))

    def buy_market_order(self, currency_pair: str, amount: ParamValue) -> Order:
        params = {"amount": clamp(amount, MARKET_ORDER_DECIMALS)}
        return coerce_order(self.call_private(f"/v2/buy/market/{currency_pair}/", params))

    def sell_market_order(self, currency_pair: str, amount: ParamValue) -> Order:
        params = {"amount": clamp(amount, MARKET_ORDER_DECIMALS)}
        return coerce_order(self.call_private(f"/v2/sell/market/{currency_pair}/", params))

    def user_transactions(
        self,
        currency_pair: str,
        offset: int = 0,
        limit: int = 100,
        sort: str = "desc",
    ) -> List[Transaction]:
        """
        Retrieves the account's transactions for ``currency_pair``, newest first
        by default. ``limit`` is capped at 1000 by Bitstamp.
        """
        check_currency_pair(currency_pair)
        check_user_transactions_page(offset, limit, sort)
        params = {"offset": offset, "limit": limit, "sort": sort}
        payload = self.call_private(f"/v2/user_transactions/{currency_pair}/", params)
        return coerce_user_transactions(currency_pair, payload)
