"""FastAPI app exposing the notifier and table report over HTTP."""

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from weatherrelay.config.schema import RelayConfig
from weatherrelay.errors import DeliveryError, WeatherRelayError
from weatherrelay.pipeline.forecast_pipeline import ForecastPipeline

logger = logging.getLogger(__name__)

FETCH_FAILED = "failed to fetch weather overview"
SEND_FAILED = "failed to send discord"


def create_app(
    config: RelayConfig, pipeline: ForecastPipeline | None = None
) -> FastAPI:
    app = FastAPI(title="Weather Relay", version="0.1.0")
    app.state.pipeline = pipeline if pipeline is not None else ForecastPipeline(config)

    @app.get("/", response_class=PlainTextResponse)
    def notify():
        """Fetch the forecast and post it to the webhook."""
        try:
            app.state.pipeline.notify()
        except DeliveryError:
            logger.exception("Webhook delivery failed")
            return PlainTextResponse(SEND_FAILED, status_code=500)
        except WeatherRelayError:
            logger.exception("Forecast fetch failed")
            return PlainTextResponse(FETCH_FAILED, status_code=500)
        return PlainTextResponse("sent")

    @app.get("/forecast", response_class=PlainTextResponse)
    def forecast():
        """Weather and temperature tables. Failures surface as a plain 500."""
        return PlainTextResponse(app.state.pipeline.table_report())

    return app
