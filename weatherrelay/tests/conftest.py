"""Shared test fixtures."""

from pathlib import Path

import pytest

from weatherrelay.config.schema import RelayConfig
from weatherrelay.ingest.parser import parse_forecast
from weatherrelay.models.forecast import ForecastDocument

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_bytes() -> bytes:
    """Raw Tokyo (130000) forecast payload as served by JMA."""
    return (FIXTURE_DIR / "jma_forecast_130000.json").read_bytes()


@pytest.fixture
def overview_bytes() -> bytes:
    return (FIXTURE_DIR / "jma_overview_130000.json").read_bytes()


@pytest.fixture
def tokyo_forecast(forecast_bytes: bytes) -> ForecastDocument:
    return parse_forecast(forecast_bytes)


@pytest.fixture
def basic_document() -> ForecastDocument:
    """One block, one area with weathers and temps."""
    return ForecastDocument.model_validate({
        "publishingOffice": "JMA",
        "reportDatetime": "2024-01-01T05:00:00+09:00",
        "timeSeries": [
            {
                "timeDefines": ["2024-01-01T06:00:00+09:00"],
                "areas": [
                    {
                        "area": {"name": "Tokyo", "code": "130000"},
                        "weathers": ["Sunny"],
                        "temps": ["5", "12"],
                    }
                ],
            }
        ],
    })


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(
        region_code="130000",
        webhook_url="https://discord.example.com/api/webhooks/1/abc",
        forecast_base_url="https://test-jma.example.com/forecast",
        overview_base_url="https://test-jma.example.com/overview_forecast",
    )
