"""Tests for classify_articles.classify_articles module."""

from datetime import datetime, timezone

from classify_articles.classify_articles import (
    accept_entry,
    classify,
    classify_entries,
    is_advertisement,
    is_relevant,
)
from common.hashing import generate_item_id
from fetch_feeds.models import FeedEntry

PUBLISHED = datetime(2024, 6, 1, 10, 0, 0, tzinfo=timezone.utc)


def _entry(title="Missile strike hits Tehran outskirts", excerpt=None, source="cnn", link="https://example.com/a", published_at=PUBLISHED):
    if excerpt is None:
        excerpt = "Officials reported damage near the airport overnight..."
    return FeedEntry(source=source, title=title, link=link, published_at=published_at, excerpt=excerpt)


class TestIsAdvertisement:
    def test_short_excerpt_without_breaking_is_ad(self) -> None:
        item = {"title": "Update on talks", "excerpt": "x" * 19, "link": "https://example.com/a"}
        assert is_advertisement(item)

    def test_short_excerpt_with_breaking_is_not_ad(self) -> None:
        item = {"title": "BREAKING: Update on talks", "excerpt": "x" * 19, "link": "https://example.com/a"}
        assert not is_advertisement(item)

    def test_excerpt_at_threshold_is_not_ad(self) -> None:
        item = {"title": "Update on talks", "excerpt": "x" * 20, "link": "https://example.com/a"}
        assert not is_advertisement(item)

    def test_promotional_phrase_is_ad(self) -> None:
        item = {"title": "Sponsored: travel to Israel", "excerpt": "x" * 40, "link": "https://example.com/a"}
        assert is_advertisement(item)

    def test_promotional_phrase_in_excerpt_is_ad(self) -> None:
        item = {"title": "Middle East travel", "excerpt": "Limited time fares to the region", "link": "https://example.com/a"}
        assert is_advertisement(item)

    def test_shop_link_is_ad(self) -> None:
        item = {"title": "Iran news", "excerpt": "x" * 40, "link": "https://example.com/shop/item"}
        assert is_advertisement(item)

    def test_subscribe_link_is_ad(self) -> None:
        item = {"title": "Iran news", "excerpt": "x" * 40, "link": "https://example.com/subscribe"}
        assert is_advertisement(item)


class TestIsRelevant:
    def test_location_and_conflict_term(self) -> None:
        assert is_relevant({"title": "Drone over Haifa", "excerpt": "", "source": "cnn"})

    def test_location_alone_is_not_relevant(self) -> None:
        assert not is_relevant({"title": "Tourism in Jerusalem grows", "excerpt": "", "source": "cnn"})

    def test_conflict_term_alone_is_not_relevant(self) -> None:
        assert not is_relevant({"title": "Missile test in the Pacific", "excerpt": "", "source": "cnn"})

    def test_strong_term_alone(self) -> None:
        assert is_relevant({"title": "Hezbollah statement released", "excerpt": "", "source": "cnn"})

    def test_relaxed_source_strike_term_alone(self) -> None:
        item = {"title": "Rocket launched overnight", "excerpt": "", "source": "jpost"}
        assert is_relevant(item)
        assert not is_relevant({**item, "source": "cnn"})

    def test_relaxed_source_still_needs_a_term(self) -> None:
        assert not is_relevant({"title": "Markets rally", "excerpt": "", "source": "aljazeera"})

    def test_custom_relaxed_sources(self) -> None:
        item = {"title": "Rocket launched overnight", "excerpt": "", "source": "cnn"}
        assert is_relevant(item, relaxed_sources={"cnn"})

    def test_match_is_case_insensitive(self) -> None:
        assert is_relevant({"title": "IRAN MISSILE LAUNCH", "excerpt": "", "source": "cnn"})


class TestClassify:
    def test_verdict(self) -> None:
        verdict = classify(_entry())
        assert verdict.is_relevant
        assert not verdict.is_advertisement
        assert verdict.accepted

    def test_ad_is_not_accepted(self) -> None:
        verdict = classify(_entry(excerpt="Too short"))
        assert verdict.is_advertisement
        assert not verdict.accepted


class TestAcceptEntry:
    def test_builds_news_item(self) -> None:
        item = accept_entry(_entry())

        assert item is not None
        assert item.id == generate_item_id("cnn", "https://example.com/a")
        assert item.source_name == "CNN"
        assert item.published_at == PUBLISHED

    def test_unparsable_date_is_excluded(self) -> None:
        assert accept_entry(_entry(published_at=None)) is None

    def test_short_title_is_excluded(self) -> None:
        assert accept_entry(_entry(title="IDF")) is None

    def test_irrelevant_is_excluded(self) -> None:
        assert accept_entry(_entry(title="Weather forecast for the weekend", excerpt="Sunny skies expected across the coast")) is None


class TestClassifyEntries:
    def test_keeps_only_accepted(self) -> None:
        entries = [
            _entry(),
            _entry(title="Update on talks", excerpt="Too short"),
            _entry(title="Rocket launched overnight", source="aljazeera", link="https://example.com/b"),
        ]

        items = classify_entries(entries)

        assert [item.title for item in items] == [
            "Missile strike hits Tehran outskirts",
            "Rocket launched overnight",
        ]
