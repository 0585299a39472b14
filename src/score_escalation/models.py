"""Data models for the score_escalation pipeline stage."""

from dataclasses import dataclass, field
from enum import Enum


class SeverityTier(str, Enum):
    NOMINAL = "nominal"
    ELEVATED = "elevated"
    CRITICAL = "critical"


@dataclass(frozen=True)
class EscalationScore:
    """Normalized escalation score of one corpus."""
    score: int
    tier: SeverityTier
    raw_total: int = 0
    items_scored: int = 0
    matched: dict[str, int] = field(default_factory=dict)
