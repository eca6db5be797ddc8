"""Models shared by several endpoint families."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TickerMarket(BaseModel):
    """Market (exchange) a ticker trades on."""

    model_config = ConfigDict(extra="allow")

    name: str
    identifier: str
    has_trading_incentive: bool | None = Field(default=None)
    logo: str | None = Field(default=None, description="Present with include_exchange_logo=true")


class Ticker(BaseModel):
    """A single trading pair quote."""

    model_config = ConfigDict(extra="allow")

    base: str
    target: str
    market: TickerMarket
    last: float | None = Field(default=None)
    volume: float | None = Field(default=None)
    cost_to_move_up_usd: float | None = Field(default=None, description="Present with depth=true")
    cost_to_move_down_usd: float | None = Field(default=None, description="Present with depth=true")
    converted_last: dict[str, float | None] = Field(default_factory=dict)
    converted_volume: dict[str, float | None] = Field(default_factory=dict)
    trust_score: str | None = Field(default=None)
    bid_ask_spread_percentage: float | None = Field(default=None)
    timestamp: str | None = Field(default=None)
    last_traded_at: str | None = Field(default=None)
    last_fetch_at: str | None = Field(default=None)
    is_anomaly: bool | None = Field(default=None)
    is_stale: bool | None = Field(default=None)
    trade_url: str | None = Field(default=None)
    token_info_url: str | None = Field(default=None)
    coin_id: str | None = Field(default=None)
    target_coin_id: str | None = Field(default=None)


class Tickers(BaseModel):
    """Ticker page for a coin or an exchange."""

    model_config = ConfigDict(extra="allow")

    name: str
    tickers: list[Ticker]


class StatusUpdateProject(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str | None = Field(default=None)
    id: str | None = Field(default=None)
    name: str | None = Field(default=None)
    image: dict[str, Any] | None = Field(default=None)


class StatusUpdate(BaseModel):
    """Announcement published by a project or exchange."""

    model_config = ConfigDict(extra="allow")

    description: str
    category: str
    created_at: str
    user: str | None = Field(default=None)
    user_title: str | None = Field(default=None)
    pin: bool | None = Field(default=None)
    project: StatusUpdateProject | None = Field(default=None)


class StatusUpdates(BaseModel):
    model_config = ConfigDict(extra="allow")

    status_updates: list[StatusUpdate]
