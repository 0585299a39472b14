"""Tests for aggregate_alerts.observers module."""

from datetime import datetime, timedelta, timezone

from aggregate_alerts.aggregator import AlertAggregator
from aggregate_alerts.models import AlertEvent, AlertKind
from aggregate_alerts.observers import MapHighlightObserver
from detect_strikes.places import STRIKE_PLACES

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestMapHighlightObserver:
    def test_highlights_known_places(self) -> None:
        observer = MapHighlightObserver()
        aggregator = AlertAggregator(observers=[observer])

        aggregator.publish(AlertEvent(kind=AlertKind.LIVE, title="Rockets", places=["haifa", "Unknown Town"], timestamp=NOW))

        highlights = observer.highlights()
        assert [h.place for h in highlights] == ["Haifa"]
        assert (highlights[0].latitude, highlights[0].longitude) == STRIKE_PLACES["Haifa"]
        assert highlights[0].kind is AlertKind.LIVE

    def test_newer_alert_replaces_highlight(self) -> None:
        observer = MapHighlightObserver()
        aggregator = AlertAggregator(observers=[observer])

        aggregator.publish(AlertEvent(kind=AlertKind.LIVE, title="a", places=["Haifa"], timestamp=NOW))
        aggregator.publish(AlertEvent(kind=AlertKind.STRIKE_CONFIRMED, title="b", places=["Beirut"], timestamp=NOW + timedelta(minutes=1)))
        aggregator.publish(AlertEvent(kind=AlertKind.STRIKE_CONFIRMED, title="c", places=["Haifa"], timestamp=NOW + timedelta(minutes=2)))

        highlights = observer.highlights()
        assert [h.place for h in highlights] == ["Haifa", "Beirut"]
        assert highlights[0].kind is AlertKind.STRIKE_CONFIRMED

    def test_clear(self) -> None:
        observer = MapHighlightObserver()
        observer(AlertEvent(kind=AlertKind.LIVE, title="a", places=["Haifa"], timestamp=NOW), AlertAggregator())

        observer.clear()

        assert observer.highlights() == []
