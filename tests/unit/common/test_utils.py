"""Tests for common.utils module."""

from common.utils import build_item_text, get_value


class TestGetValue:
    def test_dict_access(self) -> None:
        assert get_value({"name": "test"}, "name") == "test"

    def test_object_attribute_access(self) -> None:
        class Obj:
            name = "test"

        assert get_value(Obj(), "name") == "test"

    def test_dict_missing_key_returns_none(self) -> None:
        assert get_value({}, "missing") is None

    def test_object_missing_attr_returns_none(self) -> None:
        class Obj:
            pass

        assert get_value(Obj(), "missing") is None


class TestBuildItemText:
    def test_joins_and_lowercases(self) -> None:
        assert build_item_text({"title": "Missile Strike", "excerpt": "In TEHRAN"}) == "missile strike in tehran"

    def test_missing_fields(self) -> None:
        assert build_item_text({"title": "Title"}) == "title "
