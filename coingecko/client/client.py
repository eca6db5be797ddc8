"""CoinGecko v3 REST client."""

import logging
import threading
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import httpx
import orjson
from pydantic import ValidationError

from coingecko.config import load_config
from coingecko.models.coins import (
    AssetPlatform,
    Category,
    CategoryId,
    CoinsItem,
    CoinsListItem,
    CoinsMarketItem,
    Contract,
    History,
    MarketChart,
    Ohlc,
)
from coingecko.models.common import StatusUpdates, Tickers
from coingecko.models.config import ClientConfig
from coingecko.models.derivatives import Derivative, DerivativeExchange, DerivativeExchangeId
from coingecko.models.events import EventCountries, Events, EventTypes
from coingecko.models.exchanges import Exchange, ExchangeId, ExchangeRates, VolumeChartData
from coingecko.models.finance import FinancePlatform, FinanceProduct
from coingecko.models.indexes import Index, IndexId, MarketIndex
from coingecko.models.market import CompaniesPublicTreasury, Global, GlobalDefi, Trending
from coingecko.models.params import (
    CompaniesCoinId,
    DerivativeExchangeOrder,
    DerivativesIncludeTickers,
    MarketsOrder,
    OhlcDays,
    PriceChangePercentage,
    TickersOrder,
)
from coingecko.models.simple import Price, SimplePing, SupportedVsCurrencies

from .endpoints import ENDPOINTS, Endpoint
from .urls import build_url, redact_url


logger = logging.getLogger(__name__)


class CoinGeckoApiError(Exception):
    """CoinGecko API error."""

    def __init__(self, message: str, url: str | None = None, response_text: str | None = None):
        super().__init__(message)
        self.url = url
        self.response_text = response_text


class TransportError(CoinGeckoApiError):
    """Request did not complete or returned a non-2xx status."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        response_text: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, url, response_text)
        self.status_code = status_code


class DecodeError(CoinGeckoApiError):
    """Response body is not JSON or does not match the expected shape."""


class CoinGeckoClient:
    """Client for the CoinGecko v3 REST API.

    One method per endpoint. Each call is a single GET with no retries; failures
    surface as TransportError or DecodeError.
    """

    def __init__(self, config: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        self.config = config or ClientConfig()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    @classmethod
    def for_host(cls, host: str, **kwargs: Any) -> "CoinGeckoClient":
        """Client without an API key."""
        return cls(ClientConfig(host=host), **kwargs)

    @classmethod
    def with_key(cls, host: str, api_key: str, **kwargs: Any) -> "CoinGeckoClient":
        """Client sending ``api_key`` as x_cg_pro_api_key on every request."""
        return cls(ClientConfig(host=host, api_key=api_key), **kwargs)

    @classmethod
    def from_yaml(cls, name: str = "coingecko", **kwargs: Any) -> "CoinGeckoClient":
        """Client configured from ``coingecko/config/<name>.yaml``."""
        return cls(ClientConfig.from_yaml(load_config(name)), **kwargs)

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        with self._client_lock:
            if self._client is None:
                logger.debug(f"Creating HTTP client for {self.config.host}, headers={self.config.get_safe_headers()}")
                self._client = httpx.Client(
                    timeout=self.config.timeout,
                    headers=dict(self.config.headers),
                    follow_redirects=True,
                    transport=self._transport,
                )
            return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "CoinGeckoClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get_url(self, endpoint: str, query: str | None = None) -> str:
        """Build the full URL for an endpoint path and encoded query string."""
        return build_url(self.config.host, endpoint, query, self.config.api_key)

    def request_url(self, operation: str, **args: Any) -> str:
        """Build the URL an operation would request, without sending it.

        Raises:
            KeyError: If the operation is unknown
        """
        endpoint = ENDPOINTS[operation]
        return self.get_url(endpoint.format_path(args), endpoint.encode_query(args))

    def _fetch(self, url: str) -> httpx.Response:
        """Perform the GET, mapping every failure to TransportError."""
        safe_url = redact_url(url)
        logger.debug(f"GET {safe_url}")

        try:
            response = self._get_client().get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request to {safe_url} failed: {e}")
            raise TransportError(f"Request failed: {e}", safe_url) from e

        if not response.is_success:
            logger.warning(f"HTTP {response.status_code} from {safe_url}")
            raise TransportError(
                f"HTTP {response.status_code} {response.reason_phrase}",
                safe_url,
                response.text[:500],
                status_code=response.status_code,
            )

        return response

    def _decode(self, endpoint: Endpoint, url: str, response: httpx.Response) -> Any:
        """Parse the body as JSON and validate it into the endpoint's response type."""
        safe_url = redact_url(url)

        try:
            data = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            logger.warning(f"Invalid JSON from {safe_url}: {e}")
            raise DecodeError(f"Failed to parse JSON: {e}", safe_url, response.text[:500]) from e

        try:
            return endpoint.adapter.validate_python(data)
        except ValidationError as e:
            logger.warning(f"Unexpected {endpoint.name} response shape from {safe_url}")
            raise DecodeError(
                f"Response does not match {endpoint.name}: {e}", safe_url, response.text[:500]
            ) from e

    def _call(self, operation: str, **args: Any) -> Any:
        endpoint = ENDPOINTS[operation]
        url = self.get_url(endpoint.format_path(args), endpoint.encode_query(args))
        response = self._fetch(url)
        return self._decode(endpoint, url, response)

    # Ping

    def ping(self) -> SimplePing:
        """Check API server status."""
        return self._call("ping")

    # Simple

    def price(
        self,
        ids: Sequence[str],
        vs_currencies: Sequence[str],
        include_market_cap: bool = False,
        include_24hr_vol: bool = False,
        include_24hr_change: bool = False,
        include_last_updated_at: bool = False,
    ) -> dict[str, Price]:
        """Get current prices of coins in the given currencies.

        Args:
            ids: Coin ids, e.g. ["bitcoin", "ethereum"]
            vs_currencies: Target currencies, e.g. ["usd", "eur"]
            include_market_cap: Add <currency>_market_cap
            include_24hr_vol: Add <currency>_24h_vol
            include_24hr_change: Add <currency>_24h_change
            include_last_updated_at: Add last_updated_at

        Returns:
            Mapping of coin id to price entries
        """
        return self._call(
            "price",
            ids=ids,
            vs_currencies=vs_currencies,
            include_market_cap=include_market_cap,
            include_24hr_vol=include_24hr_vol,
            include_24hr_change=include_24hr_change,
            include_last_updated_at=include_last_updated_at,
        )

    def token_price(
        self,
        id: str,
        contract_addresses: Sequence[str],
        vs_currencies: Sequence[str],
        include_market_cap: bool = False,
        include_24hr_vol: bool = False,
        include_24hr_change: bool = False,
        include_last_updated_at: bool = False,
    ) -> dict[str, Price]:
        """Get current token prices by contract address on an asset platform.

        Returns:
            Mapping of contract address to price entries
        """
        return self._call(
            "token_price",
            id=id,
            contract_addresses=contract_addresses,
            vs_currencies=vs_currencies,
            include_market_cap=include_market_cap,
            include_24hr_vol=include_24hr_vol,
            include_24hr_change=include_24hr_change,
            include_last_updated_at=include_last_updated_at,
        )

    def supported_vs_currencies(self) -> SupportedVsCurrencies:
        return self._call("supported_vs_currencies")

    # Coins

    def coins_list(self, include_platform: bool = False) -> list[CoinsListItem]:
        """List all supported coins (id, symbol, name)."""
        return self._call("coins_list", include_platform=include_platform)

    def coins_markets(
        self,
        vs_currency: str,
        ids: Sequence[str] | None = None,
        category: str | None = None,
        order: MarketsOrder = MarketsOrder.MARKET_CAP_DESC,
        per_page: int = 100,
        page: int = 1,
        sparkline: bool = False,
        price_change_percentage: Sequence[PriceChangePercentage] | None = None,
    ) -> list[CoinsMarketItem]:
        """List coins with price, market cap and volume.

        ``ids``, ``category`` and ``price_change_percentage`` are sent only
        when given.
        """
        return self._call(
            "coins_markets",
            vs_currency=vs_currency,
            ids=ids,
            category=category,
            order=order,
            per_page=per_page,
            page=page,
            sparkline=sparkline,
            price_change_percentage=price_change_percentage,
        )

    def coin(
        self,
        id: str,
        localization: bool = True,
        tickers: bool = True,
        market_data: bool = True,
        community_data: bool = True,
        developer_data: bool = True,
        sparkline: bool = False,
    ) -> CoinsItem:
        """Get current data for a coin."""
        return self._call(
            "coin",
            id=id,
            localization=localization,
            tickers=tickers,
            market_data=market_data,
            community_data=community_data,
            developer_data=developer_data,
            sparkline=sparkline,
        )

    def coin_tickers(
        self,
        id: str,
        exchange_ids: Sequence[str] | None = None,
        include_exchange_logo: bool = False,
        page: int = 1,
        order: TickersOrder = TickersOrder.TRUST_SCORE_DESC,
        depth: bool = False,
    ) -> Tickers:
        """Get a coin's tickers, optionally filtered to some exchanges."""
        return self._call(
            "coin_tickers",
            id=id,
            exchange_ids=exchange_ids,
            include_exchange_logo=include_exchange_logo,
            page=page,
            order=order,
            depth=depth,
        )

    def coin_history(self, id: str, day: date, localization: bool = True) -> History:
        """Get a coin's data at 00:00 UTC on the given day."""
        return self._call("coin_history", id=id, day=day, localization=localization)

    def coin_market_chart(
        self,
        id: str,
        vs_currency: str,
        days: int | str,
        use_daily_interval: bool = False,
    ) -> MarketChart:
        """Get historical prices, market caps and volumes.

        Args:
            id: Coin id
            vs_currency: Target currency
            days: Number of days back, or "max"
            use_daily_interval: Request one data point per day
        """
        return self._call(
            "coin_market_chart",
            id=id,
            vs_currency=vs_currency,
            days=days,
            interval="daily" if use_daily_interval else None,
        )

    def coin_market_chart_range(
        self, id: str, vs_currency: str, from_: datetime, to: datetime
    ) -> MarketChart:
        """Get historical market data between two instants (naive values are UTC)."""
        return self._call("coin_market_chart_range", id=id, vs_currency=vs_currency, from_=from_, to=to)

    def coin_ohlc(self, id: str, vs_currency: str, days: OhlcDays) -> Ohlc:
        """Get [timestamp, open, high, low, close] candles."""
        return self._call("coin_ohlc", id=id, vs_currency=vs_currency, days=days)

    # Contract

    def contract(self, id: str, contract_address: str) -> Contract:
        """Get coin info from a token contract address on an asset platform."""
        return self._call("contract", id=id, contract_address=contract_address)

    def contract_market_chart(
        self, id: str, contract_address: str, vs_currency: str, days: int | str
    ) -> MarketChart:
        return self._call(
            "contract_market_chart",
            id=id,
            contract_address=contract_address,
            vs_currency=vs_currency,
            days=days,
        )

    def contract_market_chart_range(
        self,
        id: str,
        contract_address: str,
        vs_currency: str,
        from_: datetime,
        to: datetime,
    ) -> MarketChart:
        return self._call(
            "contract_market_chart_range",
            id=id,
            contract_address=contract_address,
            vs_currency=vs_currency,
            from_=from_,
            to=to,
        )

    # Asset platforms and categories

    def asset_platforms(self) -> list[AssetPlatform]:
        return self._call("asset_platforms")

    def categories_list(self) -> list[CategoryId]:
        return self._call("categories_list")

    def categories(self) -> list[Category]:
        """List categories with market data."""
        return self._call("categories")

    # Exchanges

    def exchanges(self, per_page: int = 100, page: int = 1) -> list[Exchange]:
        return self._call("exchanges", per_page=per_page, page=page)

    def exchanges_list(self) -> list[ExchangeId]:
        return self._call("exchanges_list")

    def exchange(self, id: str) -> Exchange:
        """Get exchange volume in BTC and top 100 tickers."""
        return self._call("exchange", id=id)

    def exchange_tickers(
        self,
        id: str,
        coin_ids: Sequence[str] | None = None,
        include_exchange_logo: bool = False,
        page: int = 1,
        order: TickersOrder = TickersOrder.TRUST_SCORE_DESC,
        depth: bool = False,
    ) -> Tickers:
        return self._call(
            "exchange_tickers",
            id=id,
            coin_ids=coin_ids,
            include_exchange_logo=include_exchange_logo,
            page=page,
            order=order,
            depth=depth,
        )

    def exchange_status_updates(self, id: str, per_page: int = 50, page: int = 1) -> StatusUpdates:
        return self._call("exchange_status_updates", id=id, per_page=per_page, page=page)

    def exchange_volume_chart(self, id: str, days: int) -> list[VolumeChartData]:
        return self._call("exchange_volume_chart", id=id, days=days)

    # Finance

    def finance_platforms(self, per_page: int = 100, page: int = 1) -> list[FinancePlatform]:
        return self._call("finance_platforms", per_page=per_page, page=page)

    def finance_products(self, per_page: int = 100, page: int = 1) -> list[FinanceProduct]:
        return self._call("finance_products", per_page=per_page, page=page)

    # Indexes

    def indexes(self, per_page: int = 100, page: int = 1) -> list[Index]:
        return self._call("indexes", per_page=per_page, page=page)

    def indexes_market_id(self, market_id: str, id: str) -> MarketIndex:
        return self._call("indexes_market_id", market_id=market_id, id=id)

    def indexes_list(self) -> list[IndexId]:
        return self._call("indexes_list")

    # Derivatives

    def derivatives(self, include_tickers: DerivativesIncludeTickers | None = None) -> list[Derivative]:
        """List derivative tickers. Omitting ``include_tickers`` sends 'unexpired'."""
        return self._call("derivatives", include_tickers=include_tickers)

    def derivative_exchanges(
        self,
        order: DerivativeExchangeOrder = DerivativeExchangeOrder.OPEN_INTEREST_BTC_DESC,
        per_page: int = 100,
        page: int = 1,
    ) -> list[DerivativeExchange]:
        return self._call("derivative_exchanges", order=order, per_page=per_page, page=page)

    def derivatives_exchange(
        self, id: str, include_tickers: DerivativesIncludeTickers | None = None
    ) -> DerivativeExchange:
        return self._call("derivatives_exchange", id=id, include_tickers=include_tickers)

    def derivative_exchanges_list(self) -> list[DerivativeExchangeId]:
        return self._call("derivative_exchanges_list")

    # Status updates

    def status_updates(
        self,
        category: str | None = None,
        project_type: str | None = None,
        per_page: int = 100,
        page: int = 1,
    ) -> StatusUpdates:
        """List status updates, optionally filtered by category or project type."""
        return self._call(
            "status_updates",
            category=category,
            project_type=project_type,
            per_page=per_page,
            page=page,
        )

    # Events

    def events(
        self,
        country_code: str | None,
        event_type: str | None,
        page: int,
        upcoming_events_only: bool,
        from_date: date,
        to_date: date,
    ) -> Events:
        """List events between two dates, optionally filtered by country and type."""
        return self._call(
            "events",
            country_code=country_code,
            event_type=event_type,
            page=page,
            upcoming_events_only=upcoming_events_only,
            from_date=from_date,
            to_date=to_date,
        )

    def event_countries(self) -> EventCountries:
        return self._call("event_countries")

    def event_types(self) -> EventTypes:
        return self._call("event_types")

    # Exchange rates, trending, global

    def exchange_rates(self) -> ExchangeRates:
        """Get BTC-to-currency exchange rates."""
        return self._call("exchange_rates")

    def trending(self) -> Trending:
        """Get the top-7 trending coins searched in the last 24 hours."""
        return self._call("trending")

    def global_data(self) -> Global:
        """Get global cryptocurrency market data."""
        return self._call("global_data")

    def global_defi(self) -> GlobalDefi:
        return self._call("global_defi")

    # Companies

    def companies(self, coin_id: CompaniesCoinId) -> CompaniesPublicTreasury:
        """Get public companies' bitcoin or ethereum holdings."""
        return self._call("companies", coin_id=coin_id)
