"""Pipeline context: the process-wide state shared by every component."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import timedelta

from aggregate_alerts.aggregator import AlertAggregator
from aggregate_alerts.observers import MapHighlightObserver
from aggregate_alerts.poller import HistoricalAlertPoller
from aggregate_alerts.push import PushAlertListener
from corpus.corpus import CorpusStore
from corpus.models import Corpus
from detect_strikes.detect_strikes import StrikeDetector
from monitor.config import MonitorConfig
from monitor.models import EMPTY_ESCALATION, CycleResult, PipelineSnapshot


@dataclass
class PipelineContext:
    """Owns the corpus store, strike records and alert log.

    Components receive what they need from here instead of reaching for
    module-level globals. The latest cycle result is swapped as a whole, so
    readers never see a half-finished cycle.
    """
    config: MonitorConfig
    corpus_store: CorpusStore
    strike_detector: StrikeDetector
    aggregator: AlertAggregator
    map_highlights: MapHighlightObserver
    _cycle: CycleResult | None = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def from_config(cls, config: MonitorConfig) -> PipelineContext:
        map_highlights = MapHighlightObserver()
        return cls(
            config=config,
            corpus_store=CorpusStore(),
            strike_detector=StrikeDetector(
                window=timedelta(minutes=config.strikes.window_minutes),
                ttl=timedelta(hours=config.strikes.ttl_hours),
                scan_limit=config.strikes.scan_limit,
            ),
            aggregator=AlertAggregator(
                capacity=config.alerts.capacity,
                observers=[map_highlights],
                clear_listeners=[map_highlights.clear],
            ),
            map_highlights=map_highlights,
        )

    def build_poller(self) -> HistoricalAlertPoller:
        alerts = self.config.alerts
        return HistoricalAlertPoller(
            self.aggregator,
            url=alerts.url,
            strategies=alerts.proxies,
            interval=alerts.poll_interval_seconds,
            timeout=alerts.timeout_seconds,
        )

    def build_push_listener(self) -> PushAlertListener:
        alerts = self.config.alerts
        return PushAlertListener(
            self.aggregator,
            url=alerts.push_url,
            reconnect_delay=alerts.reconnect_delay_seconds,
        )

    def record_cycle(self, cycle: CycleResult) -> None:
        with self._lock:
            self._cycle = cycle

    def latest_cycle(self) -> CycleResult | None:
        with self._lock:
            return self._cycle

    def snapshot(self) -> PipelineSnapshot:
        """Latest cycle output combined with the live alert and strike state."""
        cycle = self.latest_cycle()
        corpus = cycle.corpus if cycle else Corpus()

        return PipelineSnapshot(
            fetched_at=corpus.fetched_at,
            items=list(corpus.items),
            escalation=cycle.escalation if cycle else EMPTY_ESCALATION,
            clusters=list(cycle.clusters) if cycle else [],
            briefing=list(cycle.briefing) if cycle else [],
            alerts=self.aggregator.events(),
            defense_status=self.aggregator.status,
            active_places=self.aggregator.active_places,
            strikes=self.strike_detector.records(),
            failed_sources=list(corpus.failed_sources),
        )
