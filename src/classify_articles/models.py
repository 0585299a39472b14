"""Data models for the classify_articles pipeline stage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RelevanceVerdict:
    """Per-item classification result. Never stored on the item."""
    is_advertisement: bool
    is_relevant: bool

    @property
    def accepted(self) -> bool:
        return self.is_relevant and not self.is_advertisement
