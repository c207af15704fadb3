"""Endpoint paths and query-string construction.

Paths here are exactly what gets signed into the JWT ``uri`` claim, so
they never include the scheme, host or query string.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote

API_PREFIX = "/api/v3/brokerage"

ACCOUNTS = f"{API_PREFIX}/accounts"
BEST_BID_ASK = f"{API_PREFIX}/best_bid_ask"
MARKET_PRODUCTS = f"{API_PREFIX}/market/products"
MARKET_PRODUCT_BOOK = f"{API_PREFIX}/market/product_book"
SERVER_TIME = f"{API_PREFIX}/time"


def account_path(account_uuid: str) -> str:
    return f"{ACCOUNTS}/{quote(account_uuid, safe='')}"


def product_path(product_id: str) -> str:
    return f"{MARKET_PRODUCTS}/{quote(product_id, safe='')}"


def product_ticker_path(product_id: str) -> str:
    return f"{product_path(product_id)}/ticker"


def product_candles_path(product_id: str) -> str:
    return f"{product_path(product_id)}/candles"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        value = value.value
    return quote(str(value), safe="-_.~")


def build_query_string(params: Mapping[str, Any]) -> str:
    """Serialize query parameters in insertion order.

    ``None`` values are dropped. List and tuple values become one
    ``key=value`` pair per element. Returns ``""`` when nothing remains,
    otherwise the pairs joined with ``&`` behind a leading ``?``.

    Values are percent-encoded here (``-_.~`` kept), so pass raw values;
    already-encoded input gets encoded twice.

    >>> build_query_string({"limit": None, "offset": 5, "product_ids": ["BTC-USD", "ETH-USD"]})
    '?offset=5&product_ids=BTC-USD&product_ids=ETH-USD'
    """
    pairs: list[str] = []
    for key, value in params.items():
        if value is None:
            continue
        values: Iterable[Any] = value if isinstance(value, (list, tuple)) else (value,)
        for item in values:
            pairs.append(f"{key}={_format_value(item)}")
    if not pairs:
        return ""
    return "?" + "&".join(pairs)
