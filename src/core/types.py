"""Response records for the Coinbase Advanced Trade API.

Prices and sizes the exchange always populates use Decimal. Product
fields that Coinbase returns as possibly-empty strings stay ``str``.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Granularity(StrEnum):
    """Candle bucket width."""

    UNKNOWN_GRANULARITY = "UNKNOWN_GRANULARITY"
    ONE_MINUTE = "ONE_MINUTE"
    FIVE_MINUTE = "FIVE_MINUTE"
    FIFTEEN_MINUTE = "FIFTEEN_MINUTE"
    THIRTY_MINUTE = "THIRTY_MINUTE"
    ONE_HOUR = "ONE_HOUR"
    TWO_HOUR = "TWO_HOUR"
    SIX_HOUR = "SIX_HOUR"
    ONE_DAY = "ONE_DAY"


class ProductType(StrEnum):
    """Product type filter."""

    UNKNOWN_PRODUCT_TYPE = "UNKNOWN_PRODUCT_TYPE"
    SPOT = "SPOT"
    FUTURE = "FUTURE"


class ContractExpiryType(StrEnum):
    """Futures contract expiry filter."""

    UNKNOWN_CONTRACT_EXPIRY_TYPE = "UNKNOWN_CONTRACT_EXPIRY_TYPE"
    EXPIRING = "EXPIRING"
    PERPETUAL = "PERPETUAL"


class ExpiringContractStatus(StrEnum):
    """Expiring contract status filter."""

    UNKNOWN_EXPIRING_CONTRACT_STATUS = "UNKNOWN_EXPIRING_CONTRACT_STATUS"
    STATUS_UNEXPIRED = "STATUS_UNEXPIRED"
    STATUS_EXPIRED = "STATUS_EXPIRED"
    STATUS_ALL = "STATUS_ALL"


class Side(StrEnum):
    """Trade side."""

    BUY = "BUY"
    SELL = "SELL"
    UNKNOWN_ORDER_SIDE = "UNKNOWN_ORDER_SIDE"


# ── Accounts ─────────────────────────────────────────────────────


class Amount(BaseModel):
    """A currency amount as returned by the exchange."""

    value: Decimal
    currency: str


class Account(BaseModel):
    """A single brokerage account (one per currency)."""

    uuid: str
    name: str
    currency: str
    available_balance: Amount
    default: bool = False
    active: bool = True
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None
    type: str = ""
    ready: bool = False
    hold: Amount | None = None
    retail_portfolio_id: str = ""
    platform: str = ""


class Accounts(BaseModel):
    """A page of accounts."""

    accounts: list[Account]
    has_next: bool = False
    cursor: str = ""
    size: int = 0


class AccountResponse(BaseModel):
    """Envelope returned by the single-account endpoint."""

    account: Account


# ── Market data ──────────────────────────────────────────────────


class Trade(BaseModel):
    """A public market trade."""

    trade_id: str
    product_id: str
    price: Decimal
    size: Decimal
    time: str
    side: Side
    bid: str = ""
    ask: str = ""
    exchange: str = ""


class MarketTrades(BaseModel):
    """Recent trades plus the current top of book."""

    trades: list[Trade]
    best_bid: str = ""
    best_ask: str = ""


class BidAsk(BaseModel):
    """A single price level."""

    price: Decimal
    size: Decimal


class PriceBook(BaseModel):
    """Bids and asks for one product."""

    product_id: str
    bids: list[BidAsk] = Field(default_factory=list)
    asks: list[BidAsk] = Field(default_factory=list)
    time: str | None = None


class PriceBooks(BaseModel):
    """Best bid/ask for a set of products."""

    pricebooks: list[PriceBook]


class ProductBook(BaseModel):
    """Aggregated order book for one product."""

    pricebook: PriceBook
    last: str = ""
    mid_market: str = ""
    spread_bps: str = ""
    spread_absolute: str = ""


class Candle(BaseModel):
    """One OHLCV bucket. ``start`` is a UNIX timestamp string."""

    start: str
    low: Decimal
    high: Decimal
    open: Decimal
    close: Decimal
    volume: Decimal


class ProductCandles(BaseModel):
    candles: list[Candle]


# ── Products ─────────────────────────────────────────────────────


class Maintenance(BaseModel):
    start_time: str = ""
    end_time: str = ""


class FcmTradingSessionDetails(BaseModel):
    """Trading session state for FCM (futures) products."""

    is_session_open: bool = False
    open_time: str = ""
    close_time: str = ""
    session_state: str = ""
    after_hours_order_entry_disabled: bool = False
    closed_reason: str = ""
    maintenance: Maintenance | None = None


class PerpetualDetails(BaseModel):
    open_interest: str = ""
    funding_rate: str = ""
    funding_time: str | None = None
    max_leverage: str = ""
    base_asset_uuid: str = ""
    underlying_type: str = ""


class FutureProductDetails(BaseModel):
    """Contract metadata present only on futures products."""

    venue: str = ""
    contract_code: str = ""
    contract_expiry: str | None = None
    contract_size: str = ""
    contract_root_unit: str = ""
    group_description: str = ""
    contract_expiry_timezone: str = ""
    group_short_description: str = ""
    risk_managed_by: str = ""
    contract_expiry_type: str = ""
    perpetual_details: PerpetualDetails | None = None
    contract_display_name: str = ""
    time_to_expiry_ms: str = ""
    non_crypto: bool = False
    contract_expiry_name: str = ""


class Product(BaseModel):
    """A tradable product (spot pair or futures contract)."""

    product_id: str
    price: str = ""
    price_percentage_change_24h: str = ""
    volume_24h: str = ""
    volume_percentage_change_24h: str = ""
    base_increment: str = ""
    quote_increment: str = ""
    quote_min_size: str = ""
    quote_max_size: str = ""
    base_min_size: str = ""
    base_max_size: str = ""
    base_name: str = ""
    quote_name: str = ""
    watched: bool = False
    is_disabled: bool = False
    new: bool = False
    status: str = ""
    cancel_only: bool = False
    limit_only: bool = False
    post_only: bool = False
    trading_disabled: bool = False
    auction_mode: bool = False
    product_type: str = ""
    quote_currency_id: str = ""
    base_currency_id: str = ""
    fcm_trading_session_details: FcmTradingSessionDetails | None = None
    mid_market_price: str = ""
    alias: str = ""
    alias_to: list[str] = Field(default_factory=list)
    base_display_symbol: str = ""
    quote_display_symbol: str = ""
    view_only: bool = False
    price_increment: str = ""
    display_name: str = ""
    product_venue: str = ""
    approximate_quote_24h_volume: str = ""
    future_product_details: FutureProductDetails | None = None


class Products(BaseModel):
    products: list[Product]
    num_products: int = 0


class ServerTime(BaseModel):
    """Exchange clock in three representations."""

    model_config = ConfigDict(populate_by_name=True)

    iso: str
    epoch_seconds: str = Field(alias="epochSeconds")
    epoch_millis: str = Field(alias="epochMillis")


# ── Orders ───────────────────────────────────────────────────────


class EditOrderError(BaseModel):
    edit_failure_reason: str = ""
    preview_failure_reason: str = ""


class EditOrder(BaseModel):
    """Outcome of an order edit."""

    success: bool
    errors: list[EditOrderError] = Field(default_factory=list)
