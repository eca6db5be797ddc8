"""Models for /ping and the /simple endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class SimplePing(BaseModel):
    """Server status reply."""

    model_config = ConfigDict(extra="allow")

    gecko_says: str = Field(description="Status message, e.g. '(V3) To the Moon!'")


# Per-coin price entry keyed by currency, with optional companions such as
# "usd_market_cap", "usd_24h_vol", "usd_24h_change" and "last_updated_at".
Price = dict[str, float | None]

SupportedVsCurrencies = list[str]
