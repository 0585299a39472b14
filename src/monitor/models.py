"""Data models for the monitor orchestration stage."""

from dataclasses import dataclass, field
from datetime import datetime

from aggregate_alerts.models import AlertEvent, DefenseStatus
from cluster_narratives.models import NarrativeCluster
from corpus.models import Corpus
from detect_strikes.models import StrikeRecord
from fetch_feeds.models import NewsItem
from score_escalation.models import EscalationScore, SeverityTier


@dataclass(frozen=True)
class CycleResult:
    """Everything derived from one corpus.

    `corpus` is the store snapshot the analysis ran on, so a reader sees items
    and the scores derived from them together.
    """
    corpus: Corpus
    escalation: EscalationScore
    clusters: list[NarrativeCluster] = field(default_factory=list)
    briefing: list[str] = field(default_factory=list)
    new_strikes: int = 0


@dataclass
class PipelineSnapshot:
    """Output surface consumed by presentation layers."""
    fetched_at: datetime | None
    items: list[NewsItem]
    escalation: EscalationScore
    clusters: list[NarrativeCluster]
    briefing: list[str]
    alerts: list[AlertEvent]
    defense_status: DefenseStatus
    active_places: list[str]
    strikes: list[StrikeRecord]
    failed_sources: list[str] = field(default_factory=list)


EMPTY_ESCALATION = EscalationScore(score=0, tier=SeverityTier.NOMINAL)
