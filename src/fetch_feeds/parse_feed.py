"""Feed document parsing."""

import html
import io
import logging
import re
from datetime import datetime, timezone, timedelta

import feedparser
from dateutil.parser import parse as parse_date

from fetch_feeds.models import FeedEntry

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "No Title"
DEFAULT_LINK = "#"
EXCERPT_MAX_LENGTH = 150
TRUNCATION_MARKER = "..."

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
    "IDT": timezone(timedelta(hours=3)),
    "IST": timezone(timedelta(hours=2)),
}


def parse_feed(
    payload: bytes | str | None, source: str, now: datetime | None = None
) -> list[FeedEntry]:
    """Parse a raw feed document into candidate entries.

    Bytes are handed to feedparser undecoded so the encoding declared in the
    XML prolog wins. Malformed or non-feed payloads yield an empty list.
    """
    if not payload or not payload.strip():
        return []

    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    now = now or datetime.now(timezone.utc)

    try:
        feed = feedparser.parse(io.BytesIO(payload))
    except Exception as e:
        logger.warning("Failed to parse feed from %s: %s", source, e)
        return []

    if feed.bozo and not feed.entries:
        logger.warning("Source %s returned a malformed feed: %s", source, feed.get("bozo_exception"))
        return []

    entries = []
    for entry in feed.entries:
        try:
            entries.append(_parse_entry(entry, source, now))
        except Exception as e:
            logger.warning("Failed to parse entry from %s: %s", source, e)
            continue

    return entries


def _parse_entry(entry, source: str, now: datetime) -> FeedEntry:
    """Parse a single feed entry, substituting defaults for missing fields."""
    title = (entry.get("title") or "").strip() or DEFAULT_TITLE
    link = (entry.get("link") or "").strip() or DEFAULT_LINK
    description = entry.get("summary") or entry.get("description") or ""

    return FeedEntry(
        source=source,
        title=title,
        link=link,
        published_at=_parse_published_date(entry, now),
        excerpt=clean_excerpt(description),
    )


def _parse_published_date(entry, now: datetime) -> datetime | None:
    """Published date of an entry; `now` when absent, None when unparsable."""
    published = entry.get("published") or entry.get("updated")
    if not published:
        return now

    try:
        dt = parse_date(published, tzinfos=TZINFOS)
    except (ValueError, OverflowError, TypeError) as e:
        logger.debug("Unparsable date %r: %s", published, e)
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def clean_excerpt(text: str | None, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Strip markup, collapse whitespace and cap the length.

    The truncation marker is always appended, so an excerpt is at most
    `max_length + len(TRUNCATION_MARKER)` characters.
    """
    text = re.sub(r"<[^>]*>", " ", text or "")
    text = html.unescape(text)
    text = re.sub(r"\s+", " ", text).strip()
    return text[:max_length] + TRUNCATION_MARKER
