"""JMA bosai forecast API client."""

import logging

import httpx

from weatherrelay.errors import FetchError

logger = logging.getLogger(__name__)

JMA_FORECAST_URL = "https://www.jma.go.jp/bosai/forecast/data/forecast"
JMA_OVERVIEW_URL = "https://www.jma.go.jp/bosai/forecast/data/overview_forecast"
DEFAULT_USER_AGENT = "weatherrelay/0.1.0"


class JmaClient:
    def __init__(
        self,
        forecast_base_url: str = JMA_FORECAST_URL,
        overview_base_url: str = JMA_OVERVIEW_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        forecast_url: str = "",
        overview_url: str = "",
    ):
        self.forecast_base_url = forecast_base_url.rstrip("/")
        self.overview_base_url = overview_base_url.rstrip("/")
        self.user_agent = user_agent
        # Full document URLs; fetched verbatim when set.
        self.forecast_url = forecast_url
        self.overview_url = overview_url

    def get_forecast(self, region_code: str) -> bytes:
        """Fetch the raw forecast document array for a region code (e.g. 130000)."""
        return self._get(
            self.forecast_url or f"{self.forecast_base_url}/{region_code}.json"
        )

    def get_overview(self, region_code: str) -> bytes:
        """Fetch the raw overview (headline + text) document for a region code."""
        return self._get(
            self.overview_url or f"{self.overview_base_url}/{region_code}.json"
        )

    def _get(self, url: str) -> bytes:
        logger.info("Request URL: %s", url)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.error("JMA request failed: %s -> %s", url, e)
            raise FetchError(f"Request failed: {e}") from e
        if resp.status_code >= 400:
            logger.error("JMA %d: %s", resp.status_code, url)
            raise FetchError(f"HTTP {resp.status_code}: {url}", resp.status_code)
        return resp.content
