"""Common utility functions."""

from typing import Any


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def build_item_text(item: Any) -> str:
    """Lower-cased title and excerpt of an item, the text every keyword scan runs on."""
    title = get_value(item, "title") or ""
    excerpt = get_value(item, "excerpt") or ""
    return f"{title} {excerpt}".lower()
