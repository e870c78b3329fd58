"""Discord webhook payload builder and delivery client."""

import logging
from datetime import datetime

import httpx

from weatherrelay.errors import DeliveryError
from weatherrelay.models.common import utc_now

logger = logging.getLogger(__name__)

SENDER_USERNAME = "Ageha"
SENDER_AVATAR_URL = "https://github.com/raiga0310.png"
MESSAGE_CONTENT = "weather overview"
EMBED_TITLE = "Overview"
SOURCE_PORTAL_URL = "https://www.jma.go.jp/bosai/#pattern=forecast"
FOOTER_TEXT = "Ageha Weather Notification"
EMBED_DESCRIPTION_LIMIT = 4096
DEFAULT_DELIVERY_TIMEOUT = 10.0


def render_notification_payload(
    headline_text: str, now: datetime | None = None
) -> dict:
    """Build a webhook message with one embed carrying ``headline_text``.

    The embed timestamp is the send time, not the report time. A naive
    ``now`` is taken as local time so the timestamp always carries an offset.
    """
    sent_at = now or utc_now()
    if sent_at.tzinfo is None:
        sent_at = sent_at.astimezone()
    return {
        "username": SENDER_USERNAME,
        "avatar_url": SENDER_AVATAR_URL,
        "content": MESSAGE_CONTENT,
        "embeds": [
            {
                "title": EMBED_TITLE,
                "description": headline_text,
                "url": SOURCE_PORTAL_URL,
                "timestamp": sent_at.isoformat(),
                "footer": {"text": FOOTER_TEXT},
            }
        ],
    }


class DiscordNotifier:
    def __init__(self, webhook_url: str, timeout: float = DEFAULT_DELIVERY_TIMEOUT):
        if not webhook_url:
            raise DeliveryError("webhook URL not set")
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send(self, payload: dict) -> None:
        """POST the payload; any transport error or non-2xx status is a DeliveryError."""
        try:
            resp = httpx.post(
                self.webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            logger.error("Webhook delivery timed out after %.1fs", self.timeout)
            raise DeliveryError(f"Timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.error("Webhook delivery failed: %s", e)
            raise DeliveryError(f"Request failed: {e}") from e
        if not resp.is_success:
            logger.error("Webhook %d: %s", resp.status_code, resp.text)
            raise DeliveryError(
                f"HTTP {resp.status_code}: {resp.text}", resp.status_code
            )
        logger.info("Webhook delivered (%d)", resp.status_code)
