"""Data models for the aggregate_alerts stage."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class AlertKind(str, Enum):
    LIVE = "live"
    HISTORICAL = "historical"
    STRIKE_CONFIRMED = "strike_confirmed"


class DefenseStatus(str, Enum):
    NOMINAL = "NOMINAL"
    ACTIVE = "ACTIVE"


@dataclass(frozen=True)
class AlertEvent:
    """One entry of the merged alert log."""
    kind: AlertKind
    title: str
    places: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
