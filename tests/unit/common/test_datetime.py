"""Tests for common.datetime module."""

from datetime import datetime, timezone

from common.datetime import parse_epoch


class TestParseEpoch:
    def test_seconds(self) -> None:
        assert parse_epoch(1704110400) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_milliseconds(self) -> None:
        assert parse_epoch(1704110400000) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_numeric_string(self) -> None:
        assert parse_epoch("1704110400") == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_none_returns_none(self) -> None:
        assert parse_epoch(None) is None

    def test_garbage_returns_none(self) -> None:
        assert parse_epoch("soon") is None

    def test_bool_returns_none(self) -> None:
        assert parse_epoch(True) is None
