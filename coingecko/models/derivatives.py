"""Derivative ticker and derivative exchange models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Derivative(BaseModel):
    """Derivative contract ticker from /derivatives."""

    model_config = ConfigDict(extra="allow")

    market: str
    symbol: str
    index_id: str | None = Field(default=None)
    price: str | float | None = Field(default=None)
    price_percentage_change_24h: float | None = Field(default=None)
    contract_type: str | None = Field(default=None)
    index: float | None = Field(default=None)
    basis: float | None = Field(default=None)
    spread: float | None = Field(default=None)
    funding_rate: float | None = Field(default=None)
    open_interest: float | None = Field(default=None)
    volume_24h: float | None = Field(default=None)
    last_traded_at: int | None = Field(default=None)
    expired_at: int | None = Field(default=None)


class DerivativeExchange(BaseModel):
    """Derivative exchange from /derivatives/exchanges[/{id}].

    The detail endpoint omits ``id`` and may carry ``tickers``.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    id: str | None = Field(default=None)
    open_interest_btc: float | None = Field(default=None)
    trade_volume_24h_btc: str | float | None = Field(default=None)
    number_of_perpetual_pairs: int | None = Field(default=None)
    number_of_futures_pairs: int | None = Field(default=None)
    image: str | None = Field(default=None)
    year_established: int | None = Field(default=None)
    country: str | None = Field(default=None)
    description: str | None = Field(default=None)
    url: str | None = Field(default=None)
    tickers: list[dict[str, Any]] | None = Field(default=None)


class DerivativeExchangeId(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
