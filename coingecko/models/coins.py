"""Coin, contract, category and asset-platform models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .common import Ticker


class CoinsListItem(BaseModel):
    """Entry of /coins/list."""

    model_config = ConfigDict(extra="allow")

    id: str
    symbol: str
    name: str
    platforms: dict[str, str | None] | None = Field(
        default=None, description="Platform id -> contract address (include_platform=true)"
    )


class Roi(BaseModel):
    model_config = ConfigDict(extra="allow")

    times: float
    currency: str
    percentage: float


class SparklineIn7d(BaseModel):
    model_config = ConfigDict(extra="allow")

    price: list[float | None]


class CoinsMarketItem(BaseModel):
    """Row of /coins/markets."""

    model_config = ConfigDict(extra="allow")

    id: str
    symbol: str
    name: str
    image: str | None = Field(default=None)
    current_price: float | None = Field(default=None)
    market_cap: float | None = Field(default=None)
    market_cap_rank: int | None = Field(default=None)
    fully_diluted_valuation: float | None = Field(default=None)
    total_volume: float | None = Field(default=None)
    high_24h: float | None = Field(default=None)
    low_24h: float | None = Field(default=None)
    price_change_24h: float | None = Field(default=None)
    price_change_percentage_24h: float | None = Field(default=None)
    market_cap_change_24h: float | None = Field(default=None)
    market_cap_change_percentage_24h: float | None = Field(default=None)
    circulating_supply: float | None = Field(default=None)
    total_supply: float | None = Field(default=None)
    max_supply: float | None = Field(default=None)
    ath: float | None = Field(default=None)
    ath_change_percentage: float | None = Field(default=None)
    ath_date: str | None = Field(default=None)
    atl: float | None = Field(default=None)
    atl_change_percentage: float | None = Field(default=None)
    atl_date: str | None = Field(default=None)
    roi: Roi | None = Field(default=None)
    last_updated: str | None = Field(default=None)
    sparkline_in_7d: SparklineIn7d | None = Field(default=None)

    def price_change_percentage_in_currency(self, window: str) -> float | None:
        """Return an extra price-change window, e.g. '7d'.

        These fields only appear when requested via price_change_percentage.
        """
        value = (self.model_extra or {}).get(f"price_change_percentage_{window}_in_currency")
        return float(value) if value is not None else None


class CoinsItem(BaseModel):
    """Full coin record from /coins/{id} and /coins/{id}/contract/{address}."""

    model_config = ConfigDict(extra="allow")

    id: str
    symbol: str
    name: str
    asset_platform_id: str | None = Field(default=None)
    platforms: dict[str, str | None] | None = Field(default=None)
    block_time_in_minutes: float | None = Field(default=None)
    hashing_algorithm: str | None = Field(default=None)
    categories: list[str | None] = Field(default_factory=list)
    localization: dict[str, str] | None = Field(default=None)
    description: dict[str, str] | None = Field(default=None)
    links: dict[str, Any] | None = Field(default=None)
    image: dict[str, str] | None = Field(default=None)
    country_origin: str | None = Field(default=None)
    genesis_date: str | None = Field(default=None)
    sentiment_votes_up_percentage: float | None = Field(default=None)
    sentiment_votes_down_percentage: float | None = Field(default=None)
    market_cap_rank: int | None = Field(default=None)
    coingecko_rank: int | None = Field(default=None)
    coingecko_score: float | None = Field(default=None)
    developer_score: float | None = Field(default=None)
    community_score: float | None = Field(default=None)
    liquidity_score: float | None = Field(default=None)
    public_interest_score: float | None = Field(default=None)
    market_data: dict[str, Any] | None = Field(default=None)
    community_data: dict[str, Any] | None = Field(default=None)
    developer_data: dict[str, Any] | None = Field(default=None)
    status_updates: list[Any] = Field(default_factory=list)
    last_updated: str | None = Field(default=None)
    tickers: list[Ticker] | None = Field(default=None)


class Contract(CoinsItem):
    """Coin record looked up by token contract address."""

    contract_address: str | None = Field(default=None)


class HistoryMarketData(BaseModel):
    model_config = ConfigDict(extra="allow")

    current_price: dict[str, float | None] = Field(default_factory=dict)
    market_cap: dict[str, float | None] = Field(default_factory=dict)
    total_volume: dict[str, float | None] = Field(default_factory=dict)


class History(BaseModel):
    """Snapshot of a coin at a given date (00:00 UTC)."""

    model_config = ConfigDict(extra="allow")

    id: str
    symbol: str
    name: str
    localization: dict[str, str] | None = Field(default=None)
    image: dict[str, str] | None = Field(default=None)
    market_data: HistoryMarketData | None = Field(default=None)
    community_data: dict[str, Any] | None = Field(default=None)
    developer_data: dict[str, Any] | None = Field(default=None)
    public_interest_stats: dict[str, Any] | None = Field(default=None)


class MarketChart(BaseModel):
    """Time series of [timestamp_ms, value] pairs."""

    model_config = ConfigDict(extra="allow")

    prices: list[list[float]]
    market_caps: list[list[float | None]] = Field(default_factory=list)
    total_volumes: list[list[float | None]] = Field(default_factory=list)


# [timestamp_ms, open, high, low, close]
Ohlc = list[list[float]]


class CategoryId(BaseModel):
    """Entry of /coins/categories/list."""

    model_config = ConfigDict(extra="allow")

    category_id: str
    name: str


class Category(BaseModel):
    """Category with market data from /coins/categories."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    market_cap: float | None = Field(default=None)
    market_cap_change_24h: float | None = Field(default=None)
    content: str | None = Field(default=None)
    top_3_coins: list[str] = Field(default_factory=list)
    volume_24h: float | None = Field(default=None)
    updated_at: str | None = Field(default=None)


class AssetPlatform(BaseModel):
    """Blockchain network hosting tokens."""

    model_config = ConfigDict(extra="allow")

    id: str
    chain_identifier: int | None = Field(default=None)
    name: str
    shortname: str | None = Field(default=None)
