"""Market index models."""

from pydantic import BaseModel, ConfigDict, Field


class Index(BaseModel):
    """Row of /indexes."""

    model_config = ConfigDict(extra="allow")

    name: str
    id: str | None = Field(default=None)
    market: str | None = Field(default=None)
    last: float | None = Field(default=None)
    is_multi_asset_composite: bool | None = Field(default=None)


class MarketIndex(BaseModel):
    """Single index from /indexes/{market_id}/{id}."""

    model_config = ConfigDict(extra="allow")

    name: str
    market: str | None = Field(default=None)
    last: float | None = Field(default=None)
    is_multi_asset_composite: bool | None = Field(default=None)


class IndexId(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
