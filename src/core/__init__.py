"""Core module — config, types, logging."""

from src.core.config import Settings, get_settings, load_settings, reset_settings
from src.core.logging import setup_logging
from src.core.types import (
    Account,
    AccountResponse,
    Accounts,
    Candle,
    ContractExpiryType,
    EditOrder,
    EditOrderError,
    ExpiringContractStatus,
    Granularity,
    MarketTrades,
    PriceBook,
    PriceBooks,
    Product,
    ProductBook,
    ProductCandles,
    Products,
    ProductType,
    ServerTime,
    Side,
    Trade,
)

__all__ = [
    "Account",
    "AccountResponse",
    "Accounts",
    "Candle",
    "ContractExpiryType",
    "EditOrder",
    "EditOrderError",
    "ExpiringContractStatus",
    "Granularity",
    "MarketTrades",
    "PriceBook",
    "PriceBooks",
    "Product",
    "ProductBook",
    "ProductCandles",
    "ProductType",
    "Products",
    "ServerTime",
    "Settings",
    "Side",
    "Trade",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
