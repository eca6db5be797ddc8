"""Market-wide models: global stats, DeFi stats, trending searches and treasuries."""

from pydantic import BaseModel, ConfigDict, Field


class GlobalData(BaseModel):
    model_config = ConfigDict(extra="allow")

    active_cryptocurrencies: int
    upcoming_icos: int | None = Field(default=None)
    ongoing_icos: int | None = Field(default=None)
    ended_icos: int | None = Field(default=None)
    markets: int
    total_market_cap: dict[str, float] = Field(default_factory=dict)
    total_volume: dict[str, float] = Field(default_factory=dict)
    market_cap_percentage: dict[str, float] = Field(default_factory=dict)
    market_cap_change_percentage_24h_usd: float | None = Field(default=None)
    updated_at: int | None = Field(default=None)


class Global(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: GlobalData


class GlobalDefiData(BaseModel):
    """DeFi market stats; the API sends the figures as decimal strings."""

    model_config = ConfigDict(extra="allow")

    defi_market_cap: str | None = Field(default=None)
    eth_market_cap: str | None = Field(default=None)
    defi_to_eth_ratio: str | None = Field(default=None)
    trading_volume_24h: str | None = Field(default=None)
    defi_dominance: str | None = Field(default=None)
    top_coin_name: str | None = Field(default=None)
    top_coin_defi_dominance: float | None = Field(default=None)


class GlobalDefi(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: GlobalDefiData


class TrendingCoinItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    coin_id: int | None = Field(default=None)
    name: str
    symbol: str
    market_cap_rank: int | None = Field(default=None)
    thumb: str | None = Field(default=None)
    small: str | None = Field(default=None)
    large: str | None = Field(default=None)
    slug: str | None = Field(default=None)
    price_btc: float | None = Field(default=None)
    score: int | None = Field(default=None)


class TrendingCoin(BaseModel):
    model_config = ConfigDict(extra="allow")

    item: TrendingCoinItem


class Trending(BaseModel):
    """Top searched coins over the last 24 hours."""

    model_config = ConfigDict(extra="allow")

    coins: list[TrendingCoin]
    exchanges: list[dict] = Field(default_factory=list)


class Company(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    symbol: str | None = Field(default=None)
    country: str | None = Field(default=None)
    total_holdings: float | None = Field(default=None)
    total_entry_value_usd: float | None = Field(default=None)
    total_current_value_usd: float | None = Field(default=None)
    percentage_of_total_supply: float | None = Field(default=None)


class CompaniesPublicTreasury(BaseModel):
    """Public companies holding a coin in their treasury."""

    model_config = ConfigDict(extra="allow")

    total_holdings: float
    total_value_usd: float
    market_cap_dominance: float | None = Field(default=None)
    companies: list[Company]
