"""Fixed-interval poll of the historical alert endpoint."""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from aggregate_alerts.aggregator import AlertAggregator
from aggregate_alerts.models import AlertEvent, AlertKind
from aggregate_alerts.payloads import InvalidAlertPayload, alert_event_from_payload, decode_alert_payload
from fetch_feeds.models import ProxyStrategy
from fetch_feeds.transport import fetch_with_fallback

logger = logging.getLogger(__name__)

ALERT_URL = "https://www.oref.org.il/WarningMessages/alert/alerts.json"

ALERT_STRATEGIES = (
    ProxyStrategy(name="direct"),
    ProxyStrategy(name="allorigins-raw", prefix="https://api.allorigins.win/raw?url=", unwrap="raw"),
)

POLL_INTERVAL_SECONDS = 5.0


class HistoricalAlertPoller:
    """Polls the alert endpoint and feeds the aggregator.

    A "no content" answer clears the active alerts. Failures leave the
    current defense status untouched.
    """

    def __init__(
        self,
        aggregator: AlertAggregator,
        url: str = ALERT_URL,
        strategies: Sequence[ProxyStrategy] = ALERT_STRATEGIES,
        interval: float = POLL_INTERVAL_SECONDS,
        timeout: float = 10,
    ) -> None:
        self.aggregator = aggregator
        self.url = url
        self.strategies = strategies
        self.interval = interval
        self.timeout = timeout
        self._last_alert_id: str | None = None

    def poll_once(self) -> AlertEvent | None:
        """Poll once. Returns the published event, if any."""
        result = fetch_with_fallback(self.url, self.strategies, timeout=self.timeout, accept_no_content=True)
        if not result.ok:
            logger.warning("Could not fetch alerts (likely regional block): %s", "; ".join(result.errors))
            return None

        if result.no_content:
            self._last_alert_id = None
            self.aggregator.clear()
            return None

        try:
            payload = decode_alert_payload(result.payload)
            event = alert_event_from_payload(payload, AlertKind.HISTORICAL)
        except InvalidAlertPayload as e:
            logger.warning("Ignoring alert payload from %s: %s", self.url, e)
            return None

        # The endpoint repeats the same alert on every poll while it is active
        alert_id = payload.get("id")
        if alert_id is not None and str(alert_id) == self._last_alert_id:
            return None
        self._last_alert_id = None if alert_id is None else str(alert_id)

        self.aggregator.publish(event)
        return event

    def run(self, stop_event: threading.Event) -> None:
        """Poll every `interval` seconds until `stop_event` is set."""
        logger.info("Alert poll started (%.1fs interval)", self.interval)
        while not stop_event.is_set():
            try:
                self.poll_once()
            except Exception as e:
                logger.warning("Alert poll error: %s", e)
            stop_event.wait(self.interval)
        logger.info("Alert poll stopped")
