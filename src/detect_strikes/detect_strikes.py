"""Strike detection with time-window deduplication and TTL eviction."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Mapping, Sequence

from aggregate_alerts.models import AlertEvent, AlertKind
from common.utils import build_item_text
from detect_strikes.models import StrikeRecord
from detect_strikes.places import (
    DEDUP_WINDOW_MINUTES,
    RECORD_TTL_HOURS,
    SCAN_LIMIT,
    STRIKE_KEYWORDS,
    STRIKE_PLACES,
)
from fetch_feeds.models import NewsItem

logger = logging.getLogger(__name__)


def find_place(text: str, places: Mapping[str, tuple[float, float]] = STRIKE_PLACES) -> str | None:
    """First place of the table whose name occurs in the (lower-cased) text."""
    for place in places:
        if place.lower() in text:
            return place
    return None


class StrikeDetector:
    """Keeps the process-wide set of strike records.

    A candidate is a duplicate of a record for the same city that came from
    the same item or lies within `window` of it. Records are evicted lazily
    once older than `ttl`.
    """

    def __init__(
        self,
        window: timedelta = timedelta(minutes=DEDUP_WINDOW_MINUTES),
        ttl: timedelta = timedelta(hours=RECORD_TTL_HOURS),
        scan_limit: int = SCAN_LIMIT,
        places: Mapping[str, tuple[float, float]] = STRIKE_PLACES,
        keywords: Sequence[str] = STRIKE_KEYWORDS,
    ) -> None:
        self.window = window
        self.ttl = ttl
        self.scan_limit = scan_limit
        self.places = places
        self.keywords = tuple(keywords)
        self._records: list[StrikeRecord] = []
        self._lock = threading.Lock()

    def records(self) -> list[StrikeRecord]:
        """Current records, newest first."""
        with self._lock:
            return sorted(self._records, key=lambda r: r.detected_at, reverse=True)

    def detect(self, items: Sequence[NewsItem], now: datetime | None = None) -> list[AlertEvent]:
        """Scan the newest items and return an alert for each new strike.

        Args:
            items: Corpus items, newest first
            now: Reference time for eviction (default: current UTC time)

        Returns:
            strike_confirmed AlertEvents for records inserted by this pass
        """
        now = now or datetime.now(timezone.utc)
        events = []

        with self._lock:
            for item in items[:self.scan_limit]:
                record = self._match(item)
                if record is None:
                    continue
                if now - record.detected_at > self.ttl:
                    continue
                if self._is_duplicate(record):
                    continue

                self._records.append(record)
                logger.info("Strike confirmed in %s (%s): %s", record.city, record.source, record.title)
                events.append(
                    AlertEvent(
                        kind=AlertKind.STRIKE_CONFIRMED,
                        title=record.title,
                        places=[record.city],
                        timestamp=record.detected_at,
                    )
                )

            self._evict(now)

        return events

    def _match(self, item: NewsItem) -> StrikeRecord | None:
        text = build_item_text(item)
        if not any(keyword in text for keyword in self.keywords):
            return None

        city = find_place(text, self.places)
        if city is None:
            return None

        latitude, longitude = self.places[city]
        return StrikeRecord(
            city=city,
            latitude=latitude,
            longitude=longitude,
            title=item.title,
            source=item.source,
            detected_at=item.published_at,
            item_id=item.id,
        )

    def _is_duplicate(self, candidate: StrikeRecord) -> bool:
        """Same city, and either the same item or a timestamp within the window."""
        return any(
            record.city == candidate.city
            and (
                record.item_id == candidate.item_id
                or abs(record.detected_at - candidate.detected_at) <= self.window
            )
            for record in self._records
        )

    def _evict(self, now: datetime) -> None:
        kept = [record for record in self._records if now - record.detected_at <= self.ttl]
        evicted = len(self._records) - len(kept)
        if evicted:
            logger.info("Evicted %d expired strike records", evicted)
        self._records = kept
