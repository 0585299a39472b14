"""Data models for the corpus stage."""

from dataclasses import dataclass, field
from datetime import datetime

from fetch_feeds.models import NewsItem


@dataclass(frozen=True)
class SourceSpec:
    """A configured feed source."""
    key: str
    url: str


@dataclass
class SourceFetch:
    """Per-source outcome of a fetch cycle."""
    source: str
    ok: bool
    items: list[NewsItem] = field(default_factory=list)
    entries_seen: int = 0
    error: str | None = None


@dataclass(frozen=True)
class Corpus:
    """One fetch cycle's accepted items, newest first."""
    items: tuple[NewsItem, ...] = ()
    fetched_at: datetime | None = None
    source_counts: dict[str, int] = field(default_factory=dict)
    failed_sources: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.items)
