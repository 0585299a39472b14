"""Fetch cycle orchestration and the long-running workers."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable

from cluster_narratives.cluster_narratives import cluster_narratives
from corpus.corpus import fetch_corpus
from monitor.context import PipelineContext
from monitor.models import CycleResult, PipelineSnapshot
from score_escalation.score_escalation import score_escalation
from summarize_corpus.summarize import build_briefing

logger = logging.getLogger(__name__)


def run_cycle(context: PipelineContext, now: datetime | None = None) -> PipelineSnapshot:
    """Fetch every source, replace the corpus and analyze it."""
    config = context.config
    corpus = fetch_corpus(
        config.source_specs(),
        strategies=config.fetch.proxies,
        timeout=config.fetch.timeout_seconds,
        relaxed_sources=frozenset(config.relaxed_sources),
        max_workers=config.fetch.max_workers,
    )
    context.corpus_store.replace(corpus)
    return analyze_corpus(context, now)


def analyze_corpus(context: PipelineContext, now: datetime | None = None) -> PipelineSnapshot:
    """Score, cluster and scan the stored corpus for strikes.

    The corpus is read once from the store, so every analysis of a cycle sees
    the same items. New strike alerts are published to the aggregator before
    the cycle result is recorded.
    """
    corpus = context.corpus_store.snapshot()
    scoring = context.config.scoring
    escalation = score_escalation(corpus.items, window=scoring.window, ceiling=scoring.ceiling)
    clusters = cluster_narratives(corpus.items)
    strike_alerts = context.strike_detector.detect(corpus.items, now=now)
    context.aggregator.publish_all(strike_alerts)

    context.record_cycle(
        CycleResult(
            corpus=corpus,
            escalation=escalation,
            clusters=clusters,
            briefing=build_briefing(corpus.items),
            new_strikes=len(strike_alerts),
        )
    )

    logger.info(
        "Cycle complete: %d items, escalation %d (%s), %d clusters, %d new strikes",
        len(corpus),
        escalation.score,
        escalation.tier.value,
        len(clusters),
        len(strike_alerts),
    )
    return context.snapshot()


def start_alert_workers(context: PipelineContext, stop_event: threading.Event) -> list[threading.Thread]:
    """Start the historical poll and push listener as daemon threads."""
    workers = [
        threading.Thread(target=context.build_poller().run, args=(stop_event,), name="alert-poll", daemon=True),
        threading.Thread(target=context.build_push_listener().run, args=(stop_event,), name="alert-push", daemon=True),
    ]
    for worker in workers:
        worker.start()
    return workers


def run_forever(
    context: PipelineContext,
    stop_event: threading.Event,
    on_cycle: Callable[[PipelineSnapshot], None] | None = None,
) -> None:
    """Run fetch cycles every `fetch.interval_seconds` until `stop_event` is set."""
    interval = context.config.fetch.interval_seconds
    start_alert_workers(context, stop_event)

    while not stop_event.is_set():
        try:
            snapshot = run_cycle(context)
            if on_cycle is not None:
                on_cycle(snapshot)
        except Exception as e:
            logger.error("Fetch cycle failed: %s", e)
        stop_event.wait(interval)

    logger.info("Monitor stopped")
