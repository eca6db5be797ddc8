"""Request parameter, configuration and response models."""

from .coins import (
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
from .common import StatusUpdate, StatusUpdates, Ticker, Tickers
from .config import DEFAULT_HOST, ClientConfig
from .derivatives import Derivative, DerivativeExchange, DerivativeExchangeId
from .events import EventCountries, Events, EventTypes
from .exchanges import Exchange, ExchangeId, ExchangeRates, VolumeChartData
from .finance import FinancePlatform, FinanceProduct
from .indexes import Index, IndexId, MarketIndex
from .market import CompaniesPublicTreasury, Global, GlobalDefi, Trending
from .params import (
    CompaniesCoinId,
    DerivativeExchangeOrder,
    DerivativesIncludeTickers,
    MarketsOrder,
    OhlcDays,
    PriceChangePercentage,
    TickersOrder,
)
from .simple import Price, SimplePing, SupportedVsCurrencies

__all__ = [
    "DEFAULT_HOST",
    "ClientConfig",
    "CompaniesCoinId",
    "DerivativeExchangeOrder",
    "DerivativesIncludeTickers",
    "MarketsOrder",
    "OhlcDays",
    "PriceChangePercentage",
    "TickersOrder",
    "AssetPlatform",
    "Category",
    "CategoryId",
    "CoinsItem",
    "CoinsListItem",
    "CoinsMarketItem",
    "CompaniesPublicTreasury",
    "Contract",
    "Derivative",
    "DerivativeExchange",
    "DerivativeExchangeId",
    "EventCountries",
    "EventTypes",
    "Events",
    "Exchange",
    "ExchangeId",
    "ExchangeRates",
    "FinancePlatform",
    "FinanceProduct",
    "Global",
    "GlobalDefi",
    "History",
    "Index",
    "IndexId",
    "MarketChart",
    "MarketIndex",
    "Ohlc",
    "Price",
    "SimplePing",
    "StatusUpdate",
    "StatusUpdates",
    "SupportedVsCurrencies",
    "Ticker",
    "Tickers",
    "Trending",
    "VolumeChartData",
]
