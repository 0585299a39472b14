"""Advertisement and relevance classification of feed entries."""

import logging
from typing import Any, Collection, Iterable

from classify_articles.keywords import (
    AD_KEYWORDS,
    AD_LINK_SEGMENTS,
    BREAKING_MARKER,
    CONFLICT_KEYWORDS,
    LOCATION_KEYWORDS,
    MIN_EXCERPT_LENGTH,
    MIN_TITLE_LENGTH,
    RELAXED_KEYWORDS,
    STRONG_KEYWORDS,
)
from classify_articles.models import RelevanceVerdict
from common.hashing import generate_item_id
from common.utils import build_item_text, get_value
from fetch_feeds.models import FeedEntry, NewsItem
from fetch_feeds.sources import RELAXED_SOURCES, source_display_name

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def is_advertisement(item: Any, ad_keywords: Iterable[str] = AD_KEYWORDS) -> bool:
    """True when the item looks promotional rather than editorial."""
    if _contains_any(build_item_text(item), ad_keywords):
        return True

    title = (get_value(item, "title") or "").lower()
    excerpt = get_value(item, "excerpt") or ""
    if len(excerpt) < MIN_EXCERPT_LENGTH and BREAKING_MARKER not in title:
        return True

    link = get_value(item, "link") or ""
    return _contains_any(link, AD_LINK_SEGMENTS)


def is_relevant(
    item: Any,
    relaxed_sources: Collection[str] = RELAXED_SOURCES,
    location_keywords: Iterable[str] = LOCATION_KEYWORDS,
    conflict_keywords: Iterable[str] = CONFLICT_KEYWORDS,
    strong_keywords: Iterable[str] = STRONG_KEYWORDS,
) -> bool:
    """True when the item is about the conflict.

    A location and a conflict term together, or any strong term, qualify.
    Items from relaxed sources also qualify on a strike/missile term alone.
    """
    text = build_item_text(item)

    if _contains_any(text, location_keywords) and _contains_any(text, conflict_keywords):
        return True
    if _contains_any(text, strong_keywords):
        return True
    if get_value(item, "source") in relaxed_sources:
        return _contains_any(text, RELAXED_KEYWORDS)
    return False


def classify(item: Any, relaxed_sources: Collection[str] = RELAXED_SOURCES) -> RelevanceVerdict:
    return RelevanceVerdict(
        is_advertisement=is_advertisement(item),
        is_relevant=is_relevant(item, relaxed_sources),
    )


def accept_entry(
    entry: FeedEntry, relaxed_sources: Collection[str] = RELAXED_SOURCES
) -> NewsItem | None:
    """Build a NewsItem from an entry, or None when the entry is excluded."""
    if entry.published_at is None:
        return None
    if len(entry.title) < MIN_TITLE_LENGTH:
        return None
    if not classify(entry, relaxed_sources).accepted:
        return None

    return NewsItem(
        id=generate_item_id(entry.source, entry.link),
        source=entry.source,
        source_name=source_display_name(entry.source),
        title=entry.title,
        link=entry.link,
        published_at=entry.published_at,
        excerpt=entry.excerpt,
    )


def classify_entries(
    entries: list[FeedEntry], relaxed_sources: Collection[str] = RELAXED_SOURCES
) -> list[NewsItem]:
    """Keep the entries that pass every acceptance rule."""
    items = []
    for entry in entries:
        item = accept_entry(entry, relaxed_sources)
        if item is None:
            logger.debug("Excluded %s entry: %s", entry.source, entry.title)
            continue
        items.append(item)
    return items
