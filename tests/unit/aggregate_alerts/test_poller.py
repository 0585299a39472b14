"""Tests for aggregate_alerts.poller module."""

import threading
from unittest.mock import patch

from aggregate_alerts.aggregator import AlertAggregator
from aggregate_alerts.models import AlertKind, DefenseStatus
from aggregate_alerts.observers import MapHighlightObserver
from aggregate_alerts.poller import HistoricalAlertPoller
from fetch_feeds.models import FetchResult

ALERT_BODY = '\ufeff{"id": "133", "title": "Rocket fire", "data": ["Haifa"]}'


def _ok(payload):
    return FetchResult(url="u", ok=True, payload=payload, status_code=200, strategy="direct")


class TestHistoricalAlertPoller:
    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_publishes_historical_alert(self, mock_fetch) -> None:
        mock_fetch.return_value = _ok(ALERT_BODY)
        aggregator = AlertAggregator()

        event = HistoricalAlertPoller(aggregator, url="u").poll_once()

        assert event.kind is AlertKind.HISTORICAL
        assert aggregator.status is DefenseStatus.ACTIVE
        assert aggregator.active_places == ["Haifa"]
        assert mock_fetch.call_args[1]["accept_no_content"] is True

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_repeated_alert_id_is_published_once(self, mock_fetch) -> None:
        mock_fetch.return_value = _ok(ALERT_BODY)
        aggregator = AlertAggregator()
        poller = HistoricalAlertPoller(aggregator, url="u")

        poller.poll_once()
        assert poller.poll_once() is None

        assert len(aggregator.events()) == 1

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_no_content_clears_alerts(self, mock_fetch) -> None:
        aggregator = AlertAggregator()
        poller = HistoricalAlertPoller(aggregator, url="u")
        mock_fetch.return_value = _ok(ALERT_BODY)
        poller.poll_once()

        mock_fetch.return_value = FetchResult(url="u", ok=True, payload="", status_code=204)
        assert poller.poll_once() is None

        assert aggregator.status is DefenseStatus.NOMINAL
        assert aggregator.active_places == []
        assert len(aggregator.events()) == 1

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_no_content_clears_map_highlights(self, mock_fetch) -> None:
        highlights = MapHighlightObserver()
        aggregator = AlertAggregator(observers=[highlights], clear_listeners=[highlights.clear])
        poller = HistoricalAlertPoller(aggregator, url="u")
        mock_fetch.return_value = _ok(ALERT_BODY)
        poller.poll_once()
        assert [h.place for h in highlights.highlights()] == ["Haifa"]

        mock_fetch.return_value = FetchResult(url="u", ok=True, payload="", status_code=204)
        poller.poll_once()

        assert aggregator.status is DefenseStatus.NOMINAL
        assert highlights.highlights() == []

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_same_alert_after_clear_is_published_again(self, mock_fetch) -> None:
        aggregator = AlertAggregator()
        poller = HistoricalAlertPoller(aggregator, url="u")

        mock_fetch.return_value = _ok(ALERT_BODY)
        poller.poll_once()
        mock_fetch.return_value = FetchResult(url="u", ok=True, payload="", status_code=204)
        poller.poll_once()
        mock_fetch.return_value = _ok(ALERT_BODY)
        poller.poll_once()

        assert len(aggregator.events()) == 2

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_failure_leaves_status_unchanged(self, mock_fetch) -> None:
        aggregator = AlertAggregator()
        poller = HistoricalAlertPoller(aggregator, url="u")
        mock_fetch.return_value = _ok(ALERT_BODY)
        poller.poll_once()

        mock_fetch.return_value = FetchResult(url="u", ok=False, errors=["direct: 403"])
        assert poller.poll_once() is None

        assert aggregator.status is DefenseStatus.ACTIVE

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_invalid_payload_is_ignored(self, mock_fetch) -> None:
        mock_fetch.return_value = _ok("<html>Access denied</html>")
        aggregator = AlertAggregator()

        assert HistoricalAlertPoller(aggregator, url="u").poll_once() is None
        assert aggregator.events() == []

    @patch("aggregate_alerts.poller.fetch_with_fallback")
    def test_run_stops_on_event(self, mock_fetch) -> None:
        mock_fetch.return_value = FetchResult(url="u", ok=False)
        stop_event = threading.Event()
        stop_event.set()

        HistoricalAlertPoller(AlertAggregator(), url="u").run(stop_event)

        assert mock_fetch.call_count == 0
