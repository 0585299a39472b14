"""Data models for the detect_strikes pipeline stage."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StrikeRecord:
    """A deduplicated confirmed-strike marker tied to a place.

    `item_id` is the triggering item's id, stable across re-fetches even when
    the feed gives the item no date.
    """
    city: str
    latitude: float
    longitude: float
    title: str
    source: str
    detected_at: datetime
    item_id: str
