"""Typed client for the CoinGecko v3 market-data API."""

from .client import CoinGeckoApiError, CoinGeckoClient, DecodeError, TransportError, build_url
from .models import (
    ClientConfig,
    CompaniesCoinId,
    DerivativeExchangeOrder,
    DerivativesIncludeTickers,
    MarketsOrder,
    OhlcDays,
    PriceChangePercentage,
    TickersOrder,
)

__version__ = "0.1.0"

__all__ = [
    "CoinGeckoApiError",
    "CoinGeckoClient",
    "DecodeError",
    "TransportError",
    "build_url",
    "ClientConfig",
    "CompaniesCoinId",
    "DerivativeExchangeOrder",
    "DerivativesIncludeTickers",
    "MarketsOrder",
    "OhlcDays",
    "PriceChangePercentage",
    "TickersOrder",
]
