"""Test helpers for API client tests."""

from datetime import date, datetime
from typing import Any

import httpx

from coingecko.models.params import CompaniesCoinId, OhlcDays


HOST = "https://api.test/api/v3"


class FakeApi:
    """Mock API server for testing without network calls.

    Records every request and answers with a canned status and body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.content: bytes | None = None
        self.error: Exception | None = None

    def respond(self, body: Any = None, status_code: int = 200, content: bytes | None = None) -> None:
        self.body = body
        self.status_code = status_code
        self.content = content

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


# Minimal valid arguments for every client operation
OPERATION_ARGS: dict[str, dict[str, Any]] = {
    "ping": {},
    "price": {"ids": ["bitcoin"], "vs_currencies": ["usd"]},
    "token_price": {"id": "ethereum", "contract_addresses": ["0xabc"], "vs_currencies": ["usd"]},
    "supported_vs_currencies": {},
    "coins_list": {},
    "coins_markets": {"vs_currency": "usd"},
    "coin": {"id": "bitcoin"},
    "coin_tickers": {"id": "bitcoin"},
    "coin_history": {"id": "bitcoin", "day": date(2024, 1, 2)},
    "coin_market_chart": {"id": "bitcoin", "vs_currency": "usd", "days": 30},
    "coin_market_chart_range": {
        "id": "bitcoin",
        "vs_currency": "usd",
        "from_": datetime(2024, 1, 1),
        "to": datetime(2024, 1, 2),
    },
    "coin_ohlc": {"id": "bitcoin", "vs_currency": "usd", "days": OhlcDays.SEVEN_DAYS},
    "contract": {"id": "ethereum", "contract_address": "0xabc"},
    "contract_market_chart": {
        "id": "ethereum",
        "contract_address": "0xabc",
        "vs_currency": "usd",
        "days": 7,
    },
    "contract_market_chart_range": {
        "id": "ethereum",
        "contract_address": "0xabc",
        "vs_currency": "usd",
        "from_": datetime(2024, 1, 1),
        "to": datetime(2024, 1, 2),
    },
    "asset_platforms": {},
    "categories_list": {},
    "categories": {},
    "exchanges": {},
    "exchanges_list": {},
    "exchange": {"id": "binance"},
    "exchange_tickers": {"id": "binance"},
    "exchange_status_updates": {"id": "binance"},
    "exchange_volume_chart": {"id": "binance", "days": 1},
    "finance_platforms": {},
    "finance_products": {},
    "indexes": {},
    "indexes_market_id": {"market_id": "binance_futures", "id": "BTC"},
    "indexes_list": {},
    "derivatives": {},
    "derivative_exchanges": {},
    "derivatives_exchange": {"id": "binance_futures"},
    "derivative_exchanges_list": {},
    "status_updates": {},
    "events": {
        "country_code": None,
        "event_type": None,
        "page": 1,
        "upcoming_events_only": True,
        "from_date": date(2024, 1, 1),
        "to_date": date(2024, 2, 1),
    },
    "event_countries": {},
    "event_types": {},
    "exchange_rates": {},
    "trending": {},
    "global_data": {},
    "global_defi": {},
    "companies": {"coin_id": CompaniesCoinId.BITCOIN},
}
