"""Hashing utilities."""

import hashlib


def generate_item_id(source: str, link: str) -> str:
    """Generate a stable item ID from source key and link."""
    return hashlib.sha256(f"{source}:{link}".encode()).hexdigest()[:16]
