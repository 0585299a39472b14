"""Data models for the fetch_feeds pipeline stage."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from urllib.parse import quote


@dataclass(frozen=True)
class ProxyStrategy:
    """One hop of the transport fallback chain.

    `prefix` is None for a direct request. `unwrap` is "raw" when the proxy
    returns the upstream body as-is, or "json_contents" when it wraps it in a
    JSON object under a `contents` key.
    """
    name: str
    prefix: Optional[str] = None
    unwrap: str = "raw"

    def build_url(self, url: str) -> str:
        if not self.prefix:
            return url
        return f"{self.prefix}{quote(url, safe='')}"


@dataclass
class FetchResult:
    """Outcome of a transport call. Failures are values, not exceptions.

    `payload` is the decoded body text. `content` holds the undecoded bytes
    when the strategy returned the upstream body as-is, so XML parsers can
    honour the encoding the document declares.
    """
    url: str
    ok: bool
    payload: Optional[str] = None
    content: Optional[bytes] = None
    status_code: Optional[int] = None
    strategy: Optional[str] = None
    errors: list[str] = field(default_factory=list)

    @property
    def no_content(self) -> bool:
        return self.ok and not (self.payload or "").strip()

    @property
    def body(self) -> bytes:
        if self.content is not None:
            return self.content
        return (self.payload or "").encode("utf-8")


@dataclass
class FeedEntry:
    """Candidate item parsed from a feed, before classification."""
    source: str
    title: str
    link: str
    published_at: Optional[datetime]
    excerpt: str


@dataclass(frozen=True)
class NewsItem:
    """Accepted item of the corpus."""
    id: str
    source: str
    source_name: str
    title: str
    link: str
    published_at: datetime
    excerpt: str
