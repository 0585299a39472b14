"""Listener for the push alert channel."""

from __future__ import annotations

import logging
import threading
from typing import Any

import requests

from aggregate_alerts.aggregator import AlertAggregator
from aggregate_alerts.models import AlertEvent, AlertKind
from aggregate_alerts.payloads import InvalidAlertPayload, alert_event_from_payload, decode_alert_payload
from fetch_feeds.transport import USER_AGENT

logger = logging.getLogger(__name__)

RECONNECT_DELAY_SECONDS = 5.0


def extract_stream_message(line: str | None) -> str | None:
    """Message body of one stream line, or None for keep-alives and metadata.

    Accepts server-sent-event `data:` lines as well as bare JSON lines.
    """
    if not line:
        return None
    line = line.strip()
    if not line or line.startswith(":"):
        return None
    if line.startswith("data:"):
        return line[len("data:"):].strip() or None
    if line.startswith(("event:", "id:", "retry:")):
        return None
    return line


class PushAlertListener:
    """Publishes every payload of the push channel as a live alert.

    `handle_payload` is the callback entry point for any subscription client;
    `run` subscribes to a streaming HTTP endpoint itself.
    """

    def __init__(
        self,
        aggregator: AlertAggregator,
        url: str | None = None,
        reconnect_delay: float = RECONNECT_DELAY_SECONDS,
        timeout: float = 60,
    ) -> None:
        self.aggregator = aggregator
        self.url = url
        self.reconnect_delay = reconnect_delay
        self.timeout = timeout

    def handle_payload(self, payload: dict[str, Any] | str) -> AlertEvent | None:
        try:
            if isinstance(payload, str):
                payload = decode_alert_payload(payload)
            if not payload:
                return None
            event = alert_event_from_payload(payload, AlertKind.LIVE)
        except InvalidAlertPayload as e:
            logger.warning("Ignoring push alert: %s", e)
            return None

        self.aggregator.publish(event)
        return event

    def listen_once(self, stop_event: threading.Event) -> None:
        """Consume one streaming connection until it ends or `stop_event` is set."""
        with requests.get(
            self.url,
            stream=True,
            timeout=self.timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "text/event-stream"},
        ) as response:
            response.raise_for_status()
            for line in response.iter_lines(decode_unicode=True):
                if stop_event.is_set():
                    break
                message = extract_stream_message(line)
                if message:
                    self.handle_payload(message)

    def run(self, stop_event: threading.Event) -> None:
        """Listen until `stop_event` is set, reconnecting after failures."""
        if not self.url:
            logger.info("No push alert source configured")
            return

        logger.info("Push alert listener connecting to %s", self.url)
        while not stop_event.is_set():
            try:
                self.listen_once(stop_event)
            except requests.RequestException as e:
                logger.warning("Push alert stream failed: %s", e)
            stop_event.wait(self.reconnect_delay)
        logger.info("Push alert listener stopped")
