"""Fetch -> parse -> render -> deliver, shared by the CLI and HTTP adapters."""

import logging

from weatherrelay.config.schema import NotifySource, RelayConfig
from weatherrelay.ingest.jma_client import JmaClient
from weatherrelay.ingest.parser import parse_forecast, parse_overview
from weatherrelay.models.forecast import ForecastDocument, OverviewDocument
from weatherrelay.notify.discord import (
    EMBED_DESCRIPTION_LIMIT,
    DiscordNotifier,
    render_notification_payload,
)
from weatherrelay.reporting.formatters import (
    render_overview,
    render_report,
    render_summary,
)

logger = logging.getLogger(__name__)


class ForecastPipeline:
    """One fetch per call; nothing is cached between calls."""

    def __init__(
        self,
        config: RelayConfig,
        client: JmaClient | None = None,
        notifier: DiscordNotifier | None = None,
    ):
        self.config = config
        self.client = client or JmaClient(
            forecast_base_url=config.forecast_base_url,
            overview_base_url=config.overview_base_url,
            user_agent=config.user_agent,
            forecast_url=config.forecast_url,
            overview_url=config.overview_url,
        )
        self._notifier = notifier

    @property
    def notifier(self) -> DiscordNotifier:
        # table and dump runs have no webhook configured
        if self._notifier is None:
            self._notifier = DiscordNotifier(
                self.config.webhook_url,
                timeout=self.config.delivery_timeout_seconds,
            )
        return self._notifier

    def fetch_document(self) -> ForecastDocument:
        raw = self.client.get_forecast(self.config.region_code)
        doc = parse_forecast(raw)
        logger.info(
            "Parsed forecast from %s (%s), %d blocks",
            doc.publishing_office, doc.report_datetime, len(doc.time_series),
        )
        return doc

    def fetch_overview(self) -> OverviewDocument:
        raw = self.client.get_overview(self.config.region_code)
        return parse_overview(raw)

    def table_report(self) -> str:
        return render_report(self.fetch_document())

    def summary(self) -> str:
        return render_summary(self.fetch_document())

    def notification_text(self) -> str:
        if self.config.notify_source == NotifySource.OVERVIEW:
            text = render_overview(self.fetch_overview())
        else:
            text = self.summary()
        if len(text) > EMBED_DESCRIPTION_LIMIT:
            logger.warning(
                "Notification text is %d chars, clipping to %d",
                len(text), EMBED_DESCRIPTION_LIMIT,
            )
            text = text[: EMBED_DESCRIPTION_LIMIT - 1] + "…"
        return text

    def notify(self) -> dict:
        """Fetch, render and deliver one notification. Returns the sent payload."""
        payload = render_notification_payload(self.notification_text())
        self.notifier.send(payload)
        return payload
