"""Exchange and exchange-rate models."""

from pydantic import BaseModel, ConfigDict, Field

from .common import StatusUpdate, Ticker


class Exchange(BaseModel):
    """Spot exchange.

    List rows from /exchanges carry ``id``; the /exchanges/{id} detail does not
    but adds ``tickers`` and ``status_updates``.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    id: str | None = Field(default=None)
    year_established: int | None = Field(default=None)
    country: str | None = Field(default=None)
    description: str | None = Field(default=None)
    url: str | None = Field(default=None)
    image: str | None = Field(default=None)
    has_trading_incentive: bool | None = Field(default=None)
    trust_score: int | None = Field(default=None)
    trust_score_rank: int | None = Field(default=None)
    trade_volume_24h_btc: float | None = Field(default=None)
    trade_volume_24h_btc_normalized: float | None = Field(default=None)
    tickers: list[Ticker] | None = Field(default=None)
    status_updates: list[StatusUpdate] | None = Field(default=None)


class ExchangeId(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str


# [timestamp_ms, volume_btc]; the API sends the volume as a decimal string.
VolumeChartData = tuple[float, str]


class ExchangeRate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    unit: str
    value: float
    type: str


class ExchangeRates(BaseModel):
    """BTC-denominated exchange rates keyed by currency code."""

    model_config = ConfigDict(extra="allow")

    rates: dict[str, ExchangeRate]
