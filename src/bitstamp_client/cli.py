"""Command line interface for bitstamp_client utilities."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import math
from pathlib import Path
from typing import Any, Callable

import yaml

from bitstamp_client import config
from bitstamp_client.connection.exceptions import BitstampAPIError
from bitstamp_client.connection.rest_client import BitstampRESTClient
from bitstamp_client.connection.validation import validate_credentials
from bitstamp_client.logging_config import configure_logging
from bitstamp_client.orders import SORT_DIRECTIONS, TRANSACTION_WINDOWS


def _to_jsonable(value: Any) -> Any:
    """Turn result models into plain JSON values (``nan`` becomes ``null``)."""

    if hasattr(value, "as_dict"):
        return _to_jsonable(value.as_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_jsonable(dataclasses.asdict(value))
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _print_json(value: Any) -> None:
    print(json.dumps(_to_jsonable(value), indent=2, sort_keys=True))


def _print_error(message: str) -> int:
    """Print an error message and return a non-zero exit code."""

    print(message)
    return 1


def _build_client(args: argparse.Namespace) -> BitstampRESTClient:
    client_config = config.load_config(args.config)
    credentials = config.load_credentials(args.config)
    return BitstampRESTClient.from_config(client_config, credentials=credentials)


def _ticker_command(args: argparse.Namespace) -> int:
    _print_json(_build_client(args).ticker(args.pair))
    return 0


def _hourly_ticker_command(args: argparse.Namespace) -> int:
    _print_json(_build_client(args).hourly_ticker(args.pair))
    return 0


def _order_book_command(args: argparse.Namespace) -> int:
    _print_json(_build_client(args).order_book(args.pair))
    return 0


def _transactions_command(args: argparse.Namespace) -> int:
    _print_json(_build_client(args).transactions(args.pair, time=args.time))
    return 0


def _balance_command(args: argparse.Namespace) -> int:
    _print_json(_build_client(args).account_balance())
    return 0


def _open_orders_command(args: argparse.Namespace) -> int:
    client = _build_client(args)
    if args.pair:
        _print_json(client.open_orders(args.pair))
    else:
        _print_json(client.all_open_orders())
    return 0


def _user_transactions_command(args: argparse.Namespace) -> int:
    client = _build_client(args)
    _print_json(
        client.user_transactions(
            args.pair, offset=args.offset, limit=args.limit, sort=args.sort
        )
    )
    return 0


def _smoke_test_command(args: argparse.Namespace) -> int:
    """Perform a simple authenticated request against Bitstamp's API."""

    credentials = config.load_credentials(args.config)
    if credentials is None:
        return _print_error(
            "Credentials not available; set BITSTAMP_APIKEY, BITSTAMP_APISECRET "
            "and BITSTAMP_CUSTOMERID."
        )

    result = validate_credentials(credentials, config=config.load_config(args.config))
    if result.ok:
        print("Smoke test succeeded: authenticated request completed.")
        return 0
    return _print_error(f"Smoke test failed ({result.status.value}): {result.error}")


def _add_pair_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("pair", help="Currency pair code, e.g. btcusd")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitstamp-client", description="Bitstamp REST API client"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (defaults to the user config directory)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Emit debug logs for each request"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ticker = subparsers.add_parser("ticker", help="Last 24 hours ticker")
    _add_pair_argument(ticker)
    ticker.set_defaults(func=_ticker_command)

    hourly = subparsers.add_parser("hourly-ticker", help="Last hour ticker")
    _add_pair_argument(hourly)
    hourly.set_defaults(func=_hourly_ticker_command)

    book = subparsers.add_parser("order-book", help="Current order book")
    _add_pair_argument(book)
    book.set_defaults(func=_order_book_command)

    transactions = subparsers.add_parser("transactions", help="Recent public trades")
    _add_pair_argument(transactions)
    transactions.add_argument("--time", choices=TRANSACTION_WINDOWS, default="hour")
    transactions.set_defaults(func=_transactions_command)

    balance = subparsers.add_parser("balance", help="Account balance (private)")
    balance.set_defaults(func=_balance_command)

    open_orders = subparsers.add_parser("open-orders", help="Open orders (private)")
    open_orders.add_argument("pair", nargs="?", default=None)
    open_orders.set_defaults(func=_open_orders_command)

    user_tx = subparsers.add_parser(
        "user-transactions", help="Account transaction history (private)"
    )
    _add_pair_argument(user_tx)
    user_tx.add_argument("--offset", type=int, default=0)
    user_tx.add_argument("--limit", type=int, default=100)
    user_tx.add_argument("--sort", choices=SORT_DIRECTIONS, default="desc")
    user_tx.set_defaults(func=_user_transactions_command)

    smoke = subparsers.add_parser(
        "smoke-test", help="Validate credentials with an authenticated call"
    )
    smoke.set_defaults(func=_smoke_test_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    handler: Callable[[argparse.Namespace], int] = args.func
    try:
        return handler(args)
    except BitstampAPIError as exc:
        return _print_error(f"{exc.kind.value} error: {exc}")
    except (ValueError, yaml.YAMLError) as exc:
        return _print_error(f"configuration error: {exc}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
