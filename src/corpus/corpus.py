"""Corpus store: concurrent per-source retrieval and atomic replacement."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Collection, Sequence

from classify_articles.classify_articles import classify_entries
from corpus.models import Corpus, SourceFetch, SourceSpec
from fetch_feeds.fetch_feeds import fetch_feed_entries
from fetch_feeds.models import NewsItem, ProxyStrategy
from fetch_feeds.sources import PROXY_STRATEGIES, RELAXED_SOURCES

logger = logging.getLogger(__name__)

ALL_SOURCES = "all"


class CorpusStore:
    """Holds the current corpus. Replacement is a single reference swap."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._corpus = Corpus()

    def snapshot(self) -> Corpus:
        with self._lock:
            return self._corpus

    def replace(self, corpus: Corpus) -> None:
        with self._lock:
            self._corpus = corpus


def fetch_source_items(
    source: SourceSpec,
    strategies: Sequence[ProxyStrategy] = PROXY_STRATEGIES,
    timeout: float = 30,
    relaxed_sources: Collection[str] = RELAXED_SOURCES,
) -> SourceFetch:
    """Fetch, parse and classify one source."""
    result, entries = fetch_feed_entries(source.key, source.url, strategies, timeout)
    if not result.ok:
        return SourceFetch(source=source.key, ok=False, error="; ".join(result.errors) or "unreachable")

    items = classify_entries(entries, relaxed_sources)
    logger.info("Accepted %d of %d entries from %s", len(items), len(entries), source.key)
    return SourceFetch(source=source.key, ok=True, items=items, entries_seen=len(entries))


def fetch_corpus(
    sources: Sequence[SourceSpec],
    strategies: Sequence[ProxyStrategy] = PROXY_STRATEGIES,
    timeout: float = 30,
    relaxed_sources: Collection[str] = RELAXED_SOURCES,
    max_workers: int | None = None,
) -> Corpus:
    """Fetch every source concurrently and build a new corpus.

    Returns only after all sources have finished. A failing source is logged
    and contributes no items; it never cancels the others.
    """
    if not sources:
        logger.warning("No sources configured")
        return Corpus(fetched_at=datetime.now(timezone.utc))

    logger.info("Fetching %d sources", len(sources))
    start_time = time.monotonic()

    items: list[NewsItem] = []
    source_counts: dict[str, int] = {}
    failed: list[str] = []

    with ThreadPoolExecutor(max_workers=max_workers or len(sources)) as executor:
        futures = {
            executor.submit(fetch_source_items, source, strategies, timeout, relaxed_sources): source.key
            for source in sources
        }
        for future in as_completed(futures):
            key = futures[future]
            try:
                fetched = future.result()
            except Exception as e:
                logger.error("Failed to fetch %s: %s", key, e)
                fetched = SourceFetch(source=key, ok=False, error=str(e))

            source_counts[key] = len(fetched.items)
            if not fetched.ok:
                failed.append(key)
                continue
            items.extend(fetched.items)

    items.sort(key=lambda item: item.published_at, reverse=True)

    elapsed = time.monotonic() - start_time
    logger.info(
        "Corpus built: %d items from %d sources (%d failed) in %.2fs",
        len(items),
        len(sources),
        len(failed),
        elapsed,
    )

    return Corpus(
        items=tuple(items),
        fetched_at=datetime.now(timezone.utc),
        source_counts=source_counts,
        failed_sources=tuple(sorted(failed)),
    )


def filter_by_source(items: Sequence[NewsItem], source: str | None) -> list[NewsItem]:
    """Items of one source, or every item for "all"."""
    if not source or source == ALL_SOURCES:
        return list(items)
    return [item for item in items if item.source == source]
