"""Finance platform and product models."""

from pydantic import BaseModel, ConfigDict, Field


class FinancePlatform(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    facts: str | None = Field(default=None)
    category: str | None = Field(default=None)
    centralized: bool | None = Field(default=None)
    website_url: str | None = Field(default=None)


class FinanceProduct(BaseModel):
    model_config = ConfigDict(extra="allow")

    platform: str
    identifier: str
    supply_rate_percentage: str | float | None = Field(default=None)
    borrow_rate_percentage: str | float | None = Field(default=None)
    number_duration: int | None = Field(default=None)
    length_duration: str | None = Field(default=None)
    start_at: int | None = Field(default=None)
    end_at: int | None = Field(default=None)
    value_at: int | None = Field(default=None)
    redeem_at: int | None = Field(default=None)
