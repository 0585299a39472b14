"""Alert observers invoked by the aggregator after each published event."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, TYPE_CHECKING

from aggregate_alerts.models import AlertEvent, AlertKind
from detect_strikes.places import STRIKE_PLACES

if TYPE_CHECKING:
    from aggregate_alerts.aggregator import AlertAggregator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapHighlight:
    place: str
    latitude: float
    longitude: float
    kind: AlertKind
    timestamp: datetime


class MapHighlightObserver:
    """Tracks which known places the map should highlight.

    Places missing from the coordinate table are ignored. A newer alert for
    the same place replaces its highlight. Registered as a clear listener,
    `clear()` drops every highlight once alerts are called off.
    """

    def __init__(self, places: Mapping[str, tuple[float, float]] = STRIKE_PLACES) -> None:
        self._coordinates = {name.lower(): (name, coords) for name, coords in places.items()}
        self._highlights: dict[str, MapHighlight] = {}
        self._lock = threading.Lock()

    def __call__(self, event: AlertEvent, aggregator: AlertAggregator) -> None:
        with self._lock:
            for place in event.places:
                known = self._coordinates.get(place.strip().lower())
                if known is None:
                    continue
                name, (latitude, longitude) = known
                self._highlights[name] = MapHighlight(
                    place=name,
                    latitude=latitude,
                    longitude=longitude,
                    kind=event.kind,
                    timestamp=event.timestamp,
                )
                logger.debug("Map highlight: %s (%s)", name, event.kind.value)

    def highlights(self) -> list[MapHighlight]:
        with self._lock:
            return sorted(self._highlights.values(), key=lambda h: h.timestamp, reverse=True)

    def clear(self) -> None:
        with self._lock:
            self._highlights.clear()
