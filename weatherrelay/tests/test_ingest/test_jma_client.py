"""Tests for the JMA client with mocked httpx."""

import httpx
import pytest
import respx

from weatherrelay.errors import FetchError
from weatherrelay.ingest.jma_client import JmaClient


@pytest.fixture
def jma() -> JmaClient:
    return JmaClient(
        forecast_base_url="https://test-jma.example.com/forecast/",
        overview_base_url="https://test-jma.example.com/overview_forecast",
    )


class TestGetForecast:
    @respx.mock
    def test_success(self, jma: JmaClient, forecast_bytes: bytes):
        respx.get("https://test-jma.example.com/forecast/130000.json").mock(
            return_value=httpx.Response(200, content=forecast_bytes)
        )
        assert jma.get_forecast("130000") == forecast_bytes

    @respx.mock
    def test_user_agent_header(self, jma: JmaClient):
        route = respx.get("https://test-jma.example.com/forecast/130000.json").mock(
            return_value=httpx.Response(200, json=[])
        )
        jma.get_forecast("130000")
        assert route.called
        assert "weatherrelay" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_http_error(self, jma: JmaClient):
        respx.get("https://test-jma.example.com/forecast/999999.json").mock(
            return_value=httpx.Response(404)
        )
        with pytest.raises(FetchError, match="404") as exc_info:
            jma.get_forecast("999999")
        assert exc_info.value.status_code == 404

    @respx.mock
    def test_transport_error(self, jma: JmaClient):
        respx.get("https://test-jma.example.com/forecast/130000.json").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        with pytest.raises(FetchError, match="Request failed"):
            jma.get_forecast("130000")

    @respx.mock
    def test_no_retry(self, jma: JmaClient):
        route = respx.get("https://test-jma.example.com/forecast/130000.json").mock(
            return_value=httpx.Response(503)
        )
        with pytest.raises(FetchError):
            jma.get_forecast("130000")
        assert route.call_count == 1


class TestGetOverview:
    @respx.mock
    def test_success(self, jma: JmaClient, overview_bytes: bytes):
        respx.get("https://test-jma.example.com/overview_forecast/130000.json").mock(
            return_value=httpx.Response(200, content=overview_bytes)
        )
        assert jma.get_overview("130000") == overview_bytes


class TestUrlOverrides:
    @respx.mock
    def test_overview_url_fetched_verbatim(self, overview_bytes: bytes):
        url = "https://deploy.example.com/overview_forecast/130000.json"
        route = respx.get(url).mock(
            return_value=httpx.Response(200, content=overview_bytes)
        )
        client = JmaClient(overview_url=url)
        assert client.get_overview("") == overview_bytes
        assert route.call_count == 1

    @respx.mock
    def test_forecast_url_fetched_verbatim(self, forecast_bytes: bytes):
        url = "https://deploy.example.com/forecast/270000.json"
        respx.get(url).mock(return_value=httpx.Response(200, content=forecast_bytes))
        client = JmaClient(forecast_url=url)
        assert client.get_forecast("130000") == forecast_bytes
