"""Async client for the Coinbase Advanced Trade REST API."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from src.coinbase import endpoints
from src.coinbase.auth import Authenticator, Credentials
from src.coinbase.endpoints import build_query_string
from src.coinbase.exceptions import (
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from src.core.config import CoinbaseConfig, get_settings
from src.core.types import (
    Account,
    AccountResponse,
    Accounts,
    ContractExpiryType,
    ExpiringContractStatus,
    Granularity,
    MarketTrades,
    PriceBooks,
    Product,
    ProductBook,
    ProductCandles,
    Products,
    ProductType,
    ServerTime,
)

logger = structlog.stdlib.get_logger()

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class CoinbaseClient:
    """One coroutine per Coinbase endpoint, sharing a single httpx pool.

    Usage::

        async with CoinbaseClient() as client:
            products = await client.list_public_products(limit=10)
            accounts = await client.list_accounts()

    Private endpoints need credentials: either an explicit
    ``authenticator``, the key fields in ``config``, or the
    ``CBAT_KEY_NAME`` / ``CBAT_KEY_SECRET`` environment variables.
    """

    def __init__(
        self,
        config: CoinbaseConfig | None = None,
        authenticator: Authenticator | None = None,
        name: str = "cbat",
    ) -> None:
        self._config = config or get_settings().coinbase
        # The signed uri claim must name the host requests are sent to
        self._host = httpx.URL(self._config.base_url).host
        if authenticator is not None and authenticator.host != self._host:
            raise ConfigurationError(
                f"Authenticator signs for {authenticator.host} but base_url "
                f"targets {self._host}"
            )
        self._authenticator = authenticator
        self.name = name
        self._http: httpx.AsyncClient | None = None

    @property
    def connected(self) -> bool:
        """Whether the HTTP client is active."""
        return self._http is not None and not self._http.is_closed

    async def connect(self) -> None:
        """Create the httpx async client."""
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout_secs),
            headers={"Accept": "application/json", "User-Agent": self.name},
        )
        logger.info("coinbase_client_connected", base_url=self._config.base_url)

    async def close(self) -> None:
        """Close the httpx async client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None
            logger.info("coinbase_client_closed")

    async def __aenter__(self) -> CoinbaseClient:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    # ── Dispatch ─────────────────────────────────────────────────

    def _url(self, path: str, query: str = "") -> str:
        return f"{self._config.base_url}{path}{query}"

    def _resolve_authenticator(self) -> Authenticator:
        # Credentials are looked up per call, never cached on the client
        if self._authenticator is not None:
            return self._authenticator
        return Authenticator(Credentials.from_config(self._config), host=self._host)

    async def _send(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        if self._http is None:
            raise TransportError("HTTP client not connected")

        try:
            response = await self._http.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("coinbase_transport_error", url=url, error=str(exc))
            raise TransportError(f"Coinbase request failed for {url}: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "coinbase_http_status_error",
                url=url,
                status=response.status_code,
            )
            raise HTTPStatusError(
                f"Coinbase API returned {response.status_code} for {url}",
                response=response,
            )
        return response

    async def _public_get(self, path: str, query: str = "") -> httpx.Response:
        """Unauthenticated GET."""
        return await self._send(self._url(path, query))

    async def _authenticated_get(self, path: str, query: str = "") -> httpx.Response:
        """GET with a bearer JWT signed for ``GET {path}``.

        The query string is sent but not signed.
        """
        token = self._resolve_authenticator().create_credential("GET", path)
        return await self._send(
            self._url(path, query),
            headers={"Authorization": f"Bearer {token}"},
        )

    @staticmethod
    def _decode(response: httpx.Response, model: type[_ModelT]) -> _ModelT:
        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(f"Coinbase API returned invalid JSON for {model.__name__}") from exc

        try:
            return model.model_validate(body)
        except ValidationError as exc:
            raise DecodeError(
                f"Coinbase response does not match {model.__name__}: "
                f"{exc.error_count()} validation error(s)"
            ) from exc

    # ── Accounts ─────────────────────────────────────────────────

    async def list_accounts(
        self,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Accounts:
        """List brokerage accounts for the authenticated key."""
        query = build_query_string({"limit": limit, "cursor": cursor})
        response = await self._authenticated_get(endpoints.ACCOUNTS, query)
        return self._decode(response, Accounts)

    async def get_account(self, account_uuid: str) -> Account:
        """Fetch a single account by UUID."""
        response = await self._authenticated_get(endpoints.account_path(account_uuid))
        return self._decode(response, AccountResponse).account

    async def get_best_bid_ask(self, product_ids: Sequence[str] | None = None) -> PriceBooks:
        """Top of book for the given products, or all products when omitted."""
        query = build_query_string(
            {"product_ids": list(product_ids) if product_ids is not None else None}
        )
        response = await self._authenticated_get(endpoints.BEST_BID_ASK, query)
        return self._decode(response, PriceBooks)

    # ── Public market data ───────────────────────────────────────

    async def get_public_market_trades(
        self,
        product_id: str,
        limit: int,
        start: str | None = None,
        end: str | None = None,
    ) -> MarketTrades:
        """Recent trades for a product. ``start``/``end`` are UNIX timestamps."""
        query = build_query_string({"limit": limit, "start": start, "end": end})
        response = await self._public_get(endpoints.product_ticker_path(product_id), query)
        return self._decode(response, MarketTrades)

    async def get_public_product_book(
        self,
        product_id: str,
        limit: int | None = None,
        aggregation_price_increment: str | None = None,
    ) -> ProductBook:
        query = build_query_string(
            {
                "product_id": product_id,
                "limit": limit,
                "aggregation_price_increment": aggregation_price_increment,
            }
        )
        response = await self._public_get(endpoints.MARKET_PRODUCT_BOOK, query)
        return self._decode(response, ProductBook)

    async def get_public_product_candles(
        self,
        product_id: str,
        start: str,
        end: str,
        granularity: Granularity,
        limit: int | None = None,
    ) -> ProductCandles:
        """Historic rates for a product between two UNIX timestamps."""
        query = build_query_string(
            {"start": start, "end": end, "granularity": granularity, "limit": limit}
        )
        response = await self._public_get(endpoints.product_candles_path(product_id), query)
        return self._decode(response, ProductCandles)

    async def get_public_product(self, product_id: str) -> Product:
        response = await self._public_get(endpoints.product_path(product_id))
        return self._decode(response, Product)

    async def list_public_products(
        self,
        limit: int | None = None,
        offset: int | None = None,
        product_type: ProductType | None = None,
        product_ids: Sequence[str] | None = None,
        contract_expiry_type: ContractExpiryType | None = None,
        expiring_contract_status: ExpiringContractStatus | None = None,
        get_all_products: bool | None = None,
    ) -> Products:
        """List products, omitting every filter that is not given."""
        query = build_query_string(
            {
                "limit": limit,
                "offset": offset,
                "product_type": product_type,
                "product_ids": list(product_ids) if product_ids is not None else None,
                "contract_expiry_type": contract_expiry_type,
                "expiring_contract_status": expiring_contract_status,
                "get_all_products": get_all_products,
            }
        )
        response = await self._public_get(endpoints.MARKET_PRODUCTS, query)
        return self._decode(response, Products)

    async def get_public_server_time(self) -> ServerTime:
        response = await self._public_get(endpoints.SERVER_TIME)
        return self._decode(response, ServerTime)
