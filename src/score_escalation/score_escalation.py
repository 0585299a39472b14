"""Weighted keyword scan of the most recent items."""

import logging
import math
from typing import Any, Mapping, Sequence

from common.utils import build_item_text
from score_escalation.models import EscalationScore, SeverityTier
from score_escalation.weights import (
    ELEVATED_MAX,
    ESCALATION_CEILING,
    ESCALATION_WEIGHTS,
    NOMINAL_MAX,
    SCORING_WINDOW,
)

logger = logging.getLogger(__name__)


def severity_tier(score: int) -> SeverityTier:
    if score <= NOMINAL_MAX:
        return SeverityTier.NOMINAL
    if score <= ELEVATED_MAX:
        return SeverityTier.ELEVATED
    return SeverityTier.CRITICAL


def normalize_score(total: int, ceiling: int = ESCALATION_CEILING) -> int:
    """Map a raw weight total onto 0-100, rounding halves up."""
    if ceiling <= 0:
        raise ValueError("ceiling must be positive")
    score = math.floor(total / ceiling * 100 + 0.5)
    return max(0, min(score, 100))


def score_escalation(
    items: Sequence[Any],
    weights: Mapping[str, int] = ESCALATION_WEIGHTS,
    ceiling: int = ESCALATION_CEILING,
    window: int = SCORING_WINDOW,
) -> EscalationScore:
    """
    Score the escalation level of the newest items.

    Each keyword counts once per item it appears in; the weights of all
    matches across the window are summed and normalized against `ceiling`.

    Args:
        items: Corpus items, newest first
        weights: Keyword to weight table
        ceiling: Raw total that corresponds to a score of 100
        window: Number of newest items to scan

    Returns:
        EscalationScore with score, tier and the per-keyword match counts
    """
    recent = list(items[:window])
    total = 0
    matched: dict[str, int] = {}

    for item in recent:
        text = build_item_text(item)
        for keyword, weight in weights.items():
            if keyword in text:
                total += weight
                matched[keyword] = matched.get(keyword, 0) + 1

    score = normalize_score(total, ceiling)
    tier = severity_tier(score)
    logger.info("Escalation score %d (%s) from %d items, raw total %d", score, tier.value, len(recent), total)

    return EscalationScore(
        score=score,
        tier=tier,
        raw_total=total,
        items_scored=len(recent),
        matched=matched,
    )
