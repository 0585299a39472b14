"""Tests for aggregate_alerts.aggregator module."""

import threading
from datetime import datetime, timedelta, timezone

from aggregate_alerts.aggregator import ALERT_LOG_CAPACITY, AlertAggregator
from aggregate_alerts.models import AlertEvent, AlertKind, DefenseStatus

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _event(title="Missile Attack", places=("Haifa",), kind=AlertKind.HISTORICAL):
    return AlertEvent(kind=kind, title=title, places=list(places), timestamp=NOW)


class TestAlertAggregator:
    def test_starts_nominal(self) -> None:
        aggregator = AlertAggregator()
        assert aggregator.status is DefenseStatus.NOMINAL
        assert aggregator.events() == []
        assert aggregator.active_places == []

    def test_log_is_capped_keeping_newest(self) -> None:
        aggregator = AlertAggregator()

        for i in range(25):
            aggregator.publish(_event(title=f"alert {i}"))

        events = aggregator.events()
        assert ALERT_LOG_CAPACITY == 20
        assert len(events) == 20
        assert events[0].title == "alert 24"
        assert events[-1].title == "alert 5"

    def test_event_with_places_activates(self) -> None:
        aggregator = AlertAggregator()

        aggregator.publish(_event(places=("Haifa", "Acre")))

        assert aggregator.status is DefenseStatus.ACTIVE
        assert aggregator.active_places == ["Haifa", "Acre"]

    def test_event_without_places_is_logged_as_nominal(self) -> None:
        aggregator = AlertAggregator()
        aggregator.publish(_event())

        aggregator.publish(_event(title="All clear", places=()))

        assert aggregator.status is DefenseStatus.NOMINAL
        assert aggregator.active_places == []
        assert len(aggregator.events()) == 2

    def test_clear_keeps_history(self) -> None:
        aggregator = AlertAggregator()
        aggregator.publish(_event())

        aggregator.clear()

        assert aggregator.status is DefenseStatus.NOMINAL
        assert aggregator.active_places == []
        assert len(aggregator.events()) == 1

    def test_all_kinds_share_one_log(self) -> None:
        aggregator = AlertAggregator()

        aggregator.publish_all([
            _event(kind=AlertKind.HISTORICAL),
            _event(kind=AlertKind.LIVE),
            _event(kind=AlertKind.STRIKE_CONFIRMED),
        ])

        assert [e.kind for e in aggregator.events()] == [
            AlertKind.STRIKE_CONFIRMED,
            AlertKind.LIVE,
            AlertKind.HISTORICAL,
        ]

    def test_observers_called_in_order(self) -> None:
        calls = []
        aggregator = AlertAggregator(observers=[lambda e, a: calls.append(("first", e.title))])
        aggregator.add_observer(lambda e, a: calls.append(("second", a.status)))

        aggregator.publish(_event(title="Rockets"))

        assert calls == [("first", "Rockets"), ("second", DefenseStatus.ACTIVE)]

    def test_failing_observer_does_not_block_others(self) -> None:
        calls = []

        def broken(event, aggregator):
            raise RuntimeError("boom")

        aggregator = AlertAggregator(observers=[broken, lambda e, a: calls.append(e.title)])

        aggregator.publish(_event(title="Rockets"))

        assert calls == ["Rockets"]
        assert len(aggregator.events()) == 1

    def test_clear_notifies_listeners(self) -> None:
        calls = []
        aggregator = AlertAggregator(clear_listeners=[lambda: calls.append("first")])
        aggregator.add_clear_listener(lambda: calls.append("second"))
        aggregator.publish(_event())

        aggregator.clear()

        assert calls == ["first", "second"]

    def test_failing_clear_listener_does_not_block_others(self) -> None:
        calls = []

        def broken():
            raise RuntimeError("boom")

        aggregator = AlertAggregator(clear_listeners=[broken, lambda: calls.append("ok")])

        aggregator.clear()

        assert calls == ["ok"]
        assert aggregator.status is DefenseStatus.NOMINAL


class TestConcurrentProducers:
    def test_interleaved_publishers_keep_newest_events(self) -> None:
        producers = [AlertKind.LIVE, AlertKind.HISTORICAL, AlertKind.STRIKE_CONFIRMED]
        per_producer = 50
        aggregator = AlertAggregator()
        start = threading.Barrier(len(producers))
        published = []
        published_lock = threading.Lock()

        def produce(kind):
            start.wait()
            for i in range(per_producer):
                event = AlertEvent(
                    kind=kind,
                    title=f"{kind.value} {i}",
                    places=[f"{kind.value}-place-{i}"],
                    timestamp=NOW + timedelta(seconds=i),
                )
                with published_lock:
                    aggregator.publish(event)
                    published.append(event)

        threads = [threading.Thread(target=produce, args=(kind,)) for kind in producers]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        events = aggregator.events()
        assert len(events) == ALERT_LOG_CAPACITY
        assert events == list(reversed(published))[:ALERT_LOG_CAPACITY]
        assert aggregator.status is DefenseStatus.ACTIVE
        assert aggregator.active_places == published[-1].places

    def test_unsynchronized_publishers_lose_nothing_retained(self) -> None:
        aggregator = AlertAggregator(capacity=1000)
        start = threading.Barrier(4)

        def produce(worker):
            start.wait()
            for i in range(100):
                aggregator.publish(_event(title=f"{worker}-{i}", places=(f"p{worker}",)))

        threads = [threading.Thread(target=produce, args=(worker,)) for worker in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        events = aggregator.events()
        assert len(events) == 400
        assert len({event.title for event in events}) == 400
        assert aggregator.active_places == events[0].places
        for worker in range(4):
            titles = [e.title for e in events if e.title.startswith(f"{worker}-")]
            assert titles == [f"{worker}-{i}" for i in reversed(range(100))]
