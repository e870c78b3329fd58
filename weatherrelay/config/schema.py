"""Pydantic v2 configuration schema."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

from weatherrelay.ingest.jma_client import (
    DEFAULT_USER_AGENT,
    JMA_FORECAST_URL,
    JMA_OVERVIEW_URL,
)
from weatherrelay.notify.discord import DEFAULT_DELIVERY_TIMEOUT


class NotifySource(StrEnum):
    SUMMARY = "summary"    # full forecast dump
    OVERVIEW = "overview"  # overview_forecast headline


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class RelayConfig(BaseModel):
    """Runtime config.

    ``forecast_url`` / ``overview_url`` are full per-deployment document URLs;
    when set they are fetched as-is instead of ``<base_url>/<region_code>.json``.
    """

    model_config = {"extra": "forbid"}

    region_code: str = ""
    forecast_url: str = ""
    overview_url: str = ""
    webhook_url: str = ""
    forecast_base_url: str = JMA_FORECAST_URL
    overview_base_url: str = JMA_OVERVIEW_URL
    user_agent: str = DEFAULT_USER_AGENT
    notify_source: NotifySource = NotifySource.SUMMARY
    delivery_timeout_seconds: float = Field(default=DEFAULT_DELIVERY_TIMEOUT, gt=0.0)
    server: ServerConfig = ServerConfig()

    @field_validator("region_code", mode="before")
    @classmethod
    def _region_code_text(cls, value):
        # Unquoted YAML codes arrive as ints; 016000 is even read as octal 7168.
        if isinstance(value, int) and not isinstance(value, bool):
            if 100000 <= value <= 999999:
                return str(value)
            raise ValueError(
                f"region_code {value} is not a 6-digit JMA code; "
                "quote it in YAML, e.g. region_code: '016000'"
            )
        return value

    @model_validator(mode="after")
    def _has_target(self):
        if not (self.region_code or self.forecast_url or self.overview_url):
            raise ValueError("one of region_code, forecast_url or overview_url is required")
        return self
