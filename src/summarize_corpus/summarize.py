"""Naive briefing built from the leading sentence of recent items."""

import re
from typing import Sequence

from fetch_feeds.models import NewsItem
from fetch_feeds.parse_feed import TRUNCATION_MARKER

BRIEFING_ITEMS = 5

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str | None) -> list[str]:
    """Split on sentence-ending punctuation followed by whitespace."""
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(text.strip()) if s.strip()]


def _lead_sentence(item: NewsItem) -> str:
    excerpt = item.excerpt
    if excerpt.endswith(TRUNCATION_MARKER):
        excerpt = excerpt[: -len(TRUNCATION_MARKER)]
    sentences = split_sentences(excerpt)
    return sentences[0] if sentences else item.title


def build_briefing(items: Sequence[NewsItem], max_items: int = BRIEFING_ITEMS) -> list[str]:
    """Lead sentences of the newest items, without repeats."""
    briefing: list[str] = []
    seen: set[str] = set()
    for item in items:
        if len(briefing) >= max_items:
            break
        sentence = _lead_sentence(item)
        key = sentence.lower()
        if key in seen:
            continue
        seen.add(key)
        briefing.append(sentence)
    return briefing
