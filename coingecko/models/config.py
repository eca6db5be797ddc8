"""Configuration models for the API client."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_HOST = "https://api.coingecko.com/api/v3"


class ClientConfig(BaseModel):
    """CoinGecko client configuration.

    Immutable once built; a client owns exactly one.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, description="API base URL, without trailing slash")
    api_key: str | None = Field(default=None, description="Value for x_cg_pro_api_key")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "ClientConfig":
        """Create config from parsed YAML data."""
        config_data = {
            "host": data.get("host"),
            "api_key": data.get("api_key"),
            "timeout": data.get("timeout"),
            "headers": data.get("headers"),
        }

        # Filter out None values so model defaults apply
        config_data = {k: v for k, v in config_data.items() if v is not None}

        return cls(**config_data)

    def with_overrides(self, *, host: str | None = None, api_key: str | None = None) -> "ClientConfig":
        """Return a copy with the given non-empty values replaced."""
        update: dict[str, Any] = {}
        if host:
            update["host"] = host
        if api_key:
            update["api_key"] = api_key
        return self.model_copy(update=update)

    def get_safe_headers(self) -> dict[str, str]:
        """Get headers dict safe for logging."""
        return {k: v for k, v in self.headers.items() if k.lower() not in ("cookie", "authorization")}
