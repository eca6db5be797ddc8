"""Event calendar models."""

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    title: str
    description: str | None = Field(default=None)
    organizer: str | None = Field(default=None)
    start_date: str | None = Field(default=None)
    end_date: str | None = Field(default=None)
    website: str | None = Field(default=None)
    email: str | None = Field(default=None)
    venue: str | None = Field(default=None)
    address: str | None = Field(default=None)
    city: str | None = Field(default=None)
    country: str | None = Field(default=None)
    screenshot: str | None = Field(default=None)


class Events(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[Event]
    count: int
    page: int | None = Field(default=None)


class EventCountry(BaseModel):
    model_config = ConfigDict(extra="allow")

    country: str | None = Field(default=None)
    code: str


class EventCountries(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[EventCountry]
    count: int | None = Field(default=None)


class EventTypes(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[str]
    count: int | None = Field(default=None)


