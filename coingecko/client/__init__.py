"""CoinGecko REST client."""

from .client import CoinGeckoApiError, CoinGeckoClient, DecodeError, TransportError
from .endpoints import ENDPOINTS, Endpoint, Param
from .urls import build_url, redact_url

__all__ = [
    "CoinGeckoApiError",
    "CoinGeckoClient",
    "DecodeError",
    "TransportError",
    "ENDPOINTS",
    "Endpoint",
    "Param",
    "build_url",
    "redact_url",
]
