"""Data models for the cluster_narratives pipeline stage."""

from dataclasses import dataclass

from fetch_feeds.models import NewsItem


@dataclass(frozen=True)
class NarrativeCluster:
    """A topic with corroborating coverage."""
    topic: str
    keywords: tuple[str, ...]
    items: tuple[NewsItem, ...]

    @property
    def sources(self) -> list[str]:
        """Distinct source keys of the members, in member order."""
        return list(dict.fromkeys(item.source for item in self.items))
