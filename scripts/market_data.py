#!/usr/bin/env python3
"""Query Coinbase Advanced Trade endpoints and print the decoded result.

Usage::

    # Public endpoints
    python scripts/market_data.py time
    python scripts/market_data.py products --limit 5 --product-type SPOT
    python scripts/market_data.py candles BTC-USD --start 1700000000 --end 1700003600

    # Private endpoints (needs CBAT_KEY_NAME / CBAT_KEY_SECRET or config)
    python scripts/market_data.py accounts
    python scripts/market_data.py best-bid-ask BTC-USD ETH-USD
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog  # noqa: E402
from pydantic import BaseModel  # noqa: E402

from src.coinbase.client import CoinbaseClient  # noqa: E402
from src.coinbase.exceptions import CoinbaseError, HTTPStatusError  # noqa: E402
from src.core.config import load_settings  # noqa: E402
from src.core.logging import setup_logging  # noqa: E402
from src.core.types import Granularity, ProductType  # noqa: E402

logger = structlog.get_logger(__name__)


async def fetch(client: CoinbaseClient, args: argparse.Namespace) -> BaseModel:
    """Dispatch one subcommand to the matching client call."""
    if args.command == "time":
        return await client.get_public_server_time()
    if args.command == "products":
        return await client.list_public_products(
            limit=args.limit,
            offset=args.offset,
            product_type=args.product_type,
            product_ids=args.product_ids or None,
        )
    if args.command == "product":
        return await client.get_public_product(args.product_id)
    if args.command == "book":
        return await client.get_public_product_book(args.product_id, limit=args.limit)
    if args.command == "candles":
        return await client.get_public_product_candles(
            args.product_id,
            start=args.start,
            end=args.end,
            granularity=args.granularity,
            limit=args.limit,
        )
    if args.command == "trades":
        return await client.get_public_market_trades(
            args.product_id, limit=args.limit, start=args.start, end=args.end
        )
    if args.command == "accounts":
        return await client.list_accounts(limit=args.limit)
    if args.command == "account":
        return await client.get_account(args.account_uuid)
    if args.command == "best-bid-ask":
        return await client.get_best_bid_ask(args.product_ids or None)
    raise ValueError(f"Unknown command: {args.command}")


async def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    setup_logging(level=args.log_level)

    async with CoinbaseClient(settings.coinbase) as client:
        try:
            result = await fetch(client, args)
        except HTTPStatusError as exc:
            logger.error("request_failed", status=exc.status_code, body=exc.response.text)
            return 1
        except CoinbaseError as exc:
            logger.error("request_failed", error=str(exc))
            return 1

    print(result.model_dump_json(indent=2, by_alias=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query the Coinbase Advanced Trade REST API.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override: DEBUG, INFO, WARNING, ERROR",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("time", help="Server time")

    products = sub.add_parser("products", help="List products")
    products.add_argument("product_ids", nargs="*")
    products.add_argument("--limit", type=int, default=None)
    products.add_argument("--offset", type=int, default=None)
    products.add_argument("--product-type", type=ProductType, default=None)

    product = sub.add_parser("product", help="Single product")
    product.add_argument("product_id")

    book = sub.add_parser("book", help="Product order book")
    book.add_argument("product_id")
    book.add_argument("--limit", type=int, default=None)

    candles = sub.add_parser("candles", help="Product candles")
    candles.add_argument("product_id")
    candles.add_argument("--start", required=True, help="UNIX timestamp")
    candles.add_argument("--end", required=True, help="UNIX timestamp")
    candles.add_argument(
        "--granularity", type=Granularity, default=Granularity.ONE_HOUR
    )
    candles.add_argument("--limit", type=int, default=None)

    trades = sub.add_parser("trades", help="Recent market trades")
    trades.add_argument("product_id")
    trades.add_argument("--limit", type=int, default=100)
    trades.add_argument("--start", default=None)
    trades.add_argument("--end", default=None)

    accounts = sub.add_parser("accounts", help="List accounts (private)")
    accounts.add_argument("--limit", type=int, default=None)

    account = sub.add_parser("account", help="Single account (private)")
    account.add_argument("account_uuid")

    bba = sub.add_parser("best-bid-ask", help="Best bid/ask (private)")
    bba.add_argument("product_ids", nargs="*")

    return parser


def main() -> None:
    args = build_parser().parse_args()
    code = asyncio.run(run(args))
    sys.exit(code)


if __name__ == "__main__":
    main()
