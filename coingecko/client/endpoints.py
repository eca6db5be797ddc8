"""Declarative table of API endpoints.

Every operation is described once: its path template, the query parameters it
sends (in order) and the type its JSON body is validated into. The client runs
all of them through the same request function.
"""

import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import TypeAdapter

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
from coingecko.models.derivatives import Derivative, DerivativeExchange, DerivativeExchangeId
from coingecko.models.events import EventCountries, Events, EventTypes
from coingecko.models.exchanges import Exchange, ExchangeId, ExchangeRates, VolumeChartData
from coingecko.models.finance import FinancePlatform, FinanceProduct
from coingecko.models.indexes import Index, IndexId, MarketIndex
from coingecko.models.market import CompaniesPublicTreasury, Global, GlobalDefi, Trending
from coingecko.models.params import DerivativesIncludeTickers
from coingecko.models.simple import Price, SimplePing, SupportedVsCurrencies

from .encoding import (
    encode_bool,
    encode_event_date,
    encode_history_date,
    encode_list,
    encode_timestamp,
    encode_value,
)


@dataclass(frozen=True)
class Param:
    """Query parameter spec.

    ``key`` is the wire name, ``arg`` the call argument it reads (defaults to
    ``key``). A ``None`` argument falls back to ``default``; if that is also
    ``None`` an optional parameter is left out of the query entirely.
    """

    key: str
    encode: Callable[[Any], str] = encode_value
    arg: str | None = None
    optional: bool = False
    default: Any = None

    @property
    def name(self) -> str:
        return self.arg or self.key


@dataclass(frozen=True)
class Endpoint:
    """A single GET operation."""

    name: str
    path: str
    response: Any
    params: tuple[Param, ...] = ()

    @property
    def path_fields(self) -> list[str]:
        return [field for _, field, _, _ in string.Formatter().parse(self.path) if field]

    @cached_property
    def adapter(self) -> TypeAdapter:
        return TypeAdapter(self.response)

    def format_path(self, args: Mapping[str, Any]) -> str:
        """Fill the path template, percent-quoting each segment."""
        return self.path.format(**{field: encode_value(args[field]) for field in self.path_fields})

    def encode_query(self, args: Mapping[str, Any]) -> str | None:
        """Build the ``?k=v&...`` query string, or None when nothing is sent."""
        pairs = []
        for param in self.params:
            value = args.get(param.name)
            if value is None:
                value = param.default
            if value is None:
                if param.optional:
                    continue
                raise TypeError(f"{self.name}() requires a value for '{param.name}'")
            pairs.append(f"{param.key}={param.encode(value)}")

        if not pairs:
            return None
        return "?" + "&".join(pairs)


def _flags(*keys: str) -> tuple[Param, ...]:
    return tuple(Param(key, encode_bool) for key in keys)


_PRICE_FLAGS = _flags(
    "include_market_cap",
    "include_24hr_vol",
    "include_24hr_change",
    "include_last_updated_at",
)

_PAGING = (Param("per_page"), Param("page"))

_TICKER_PAGE = (
    *_flags("include_exchange_logo"),
    Param("page"),
    Param("order"),
    *_flags("depth"),
)

_RANGE = (
    Param("vs_currency"),
    Param("from", encode_timestamp, arg="from_"),
    Param("to", encode_timestamp),
)

_INCLUDE_TICKERS = Param("include_tickers", default=DerivativesIncludeTickers.UNEXPIRED)


ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        # Ping
        Endpoint("ping", "/ping", SimplePing),
        # Simple
        Endpoint(
            "price",
            "/simple/price",
            dict[str, Price],
            (Param("ids", encode_list), Param("vs_currencies", encode_list), *_PRICE_FLAGS),
        ),
        Endpoint(
            "token_price",
            "/simple/token_price/{id}",
            dict[str, Price],
            (
                Param("contract_addresses", encode_list),
                Param("vs_currencies", encode_list),
                *_PRICE_FLAGS,
            ),
        ),
        Endpoint("supported_vs_currencies", "/simple/supported_vs_currencies", SupportedVsCurrencies),
        # Coins
        Endpoint("coins_list", "/coins/list", list[CoinsListItem], _flags("include_platform")),
        Endpoint(
            "coins_markets",
            "/coins/markets",
            list[CoinsMarketItem],
            (
                Param("vs_currency"),
                Param("ids", encode_list, optional=True),
                Param("category", optional=True),
                Param("order"),
                Param("per_page"),
                Param("page"),
                *_flags("sparkline"),
                Param("price_change_percentage", encode_list, optional=True),
            ),
        ),
        Endpoint(
            "coin",
            "/coins/{id}",
            CoinsItem,
            _flags(
                "localization",
                "tickers",
                "market_data",
                "community_data",
                "developer_data",
                "sparkline",
            ),
        ),
        Endpoint(
            "coin_tickers",
            "/coins/{id}/tickers",
            Tickers,
            (Param("exchange_ids", encode_list, optional=True), *_TICKER_PAGE),
        ),
        Endpoint(
            "coin_history",
            "/coins/{id}/history",
            History,
            (Param("date", encode_history_date, arg="day"), *_flags("localization")),
        ),
        Endpoint(
            "coin_market_chart",
            "/coins/{id}/market_chart",
            MarketChart,
            (Param("vs_currency"), Param("days"), Param("interval", optional=True)),
        ),
        Endpoint("coin_market_chart_range", "/coins/{id}/market_chart/range", MarketChart, _RANGE),
        Endpoint("coin_ohlc", "/coins/{id}/ohlc", Ohlc, (Param("vs_currency"), Param("days"))),
        # Contract
        Endpoint("contract", "/coins/{id}/contract/{contract_address}", Contract),
        Endpoint(
            "contract_market_chart",
            "/coins/{id}/contract/{contract_address}/market_chart/",
            MarketChart,
            (Param("vs_currency"), Param("days")),
        ),
        Endpoint(
            "contract_market_chart_range",
            "/coins/{id}/contract/{contract_address}/market_chart/range",
            MarketChart,
            _RANGE,
        ),
        # Asset platforms and categories
        Endpoint("asset_platforms", "/asset_platforms", list[AssetPlatform]),
        Endpoint("categories_list", "/coins/categories/list", list[CategoryId]),
        Endpoint("categories", "/coins/categories", list[Category]),
        # Exchanges
        Endpoint("exchanges", "/exchanges", list[Exchange], _PAGING),
        Endpoint("exchanges_list", "/exchanges/list", list[ExchangeId]),
        Endpoint("exchange", "/exchanges/{id}", Exchange),
        Endpoint(
            "exchange_tickers",
            "/exchanges/{id}/tickers",
            Tickers,
            (Param("coin_ids", encode_list, optional=True), *_TICKER_PAGE),
        ),
        Endpoint("exchange_status_updates", "/exchanges/{id}/status_updates", StatusUpdates, _PAGING),
        Endpoint(
            "exchange_volume_chart",
            "/exchanges/{id}/volume_chart",
            list[VolumeChartData],
            (Param("days"),),
        ),
        # Finance
        Endpoint("finance_platforms", "/finance_platforms", list[FinancePlatform], _PAGING),
        Endpoint("finance_products", "/finance_products", list[FinanceProduct], _PAGING),
        # Indexes
        Endpoint("indexes", "/indexes", list[Index], _PAGING),
        Endpoint("indexes_market_id", "/indexes/{market_id}/{id}", MarketIndex),
        Endpoint("indexes_list", "/indexes/list", list[IndexId]),
        # Derivatives
        Endpoint("derivatives", "/derivatives", list[Derivative], (_INCLUDE_TICKERS,)),
        Endpoint(
            "derivative_exchanges",
            "/derivatives/exchanges",
            list[DerivativeExchange],
            (Param("order"), *_PAGING),
        ),
        Endpoint(
            "derivatives_exchange",
            "/derivatives/exchanges/{id}",
            DerivativeExchange,
            (_INCLUDE_TICKERS,),
        ),
        Endpoint("derivative_exchanges_list", "/derivatives/exchanges/list", list[DerivativeExchangeId]),
        # Status updates
        Endpoint(
            "status_updates",
            "/status_updates",
            StatusUpdates,
            (Param("category", optional=True), Param("project_type", optional=True), *_PAGING),
        ),
        # Events
        Endpoint(
            "events",
            "/events",
            Events,
            (
                Param("country_code", optional=True),
                Param("type", arg="event_type", optional=True),
                Param("page"),
                *_flags("upcoming_events_only"),
                Param("from_date", encode_event_date),
                Param("to_date", encode_event_date),
            ),
        ),
        Endpoint("event_countries", "/events/countries", EventCountries),
        Endpoint("event_types", "/events/types", EventTypes),
        # Exchange rates, trending, global, companies
        Endpoint("exchange_rates", "/exchange_rates", ExchangeRates),
        Endpoint("trending", "/search/trending", Trending),
        Endpoint("global_data", "/global", Global),
        Endpoint("global_defi", "/global/decentralized_finance_defi", GlobalDefi),
        Endpoint("companies", "/companies/public_treasury/{coin_id}", CompaniesPublicTreasury),
    )
}
