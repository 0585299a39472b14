"""Retrieve and parse a single feed source."""

import logging
from typing import Sequence

from fetch_feeds.models import FeedEntry, FetchResult, ProxyStrategy
from fetch_feeds.parse_feed import parse_feed
from fetch_feeds.sources import PROXY_STRATEGIES
from fetch_feeds.transport import fetch_with_fallback

logger = logging.getLogger(__name__)


def fetch_feed_entries(
    source: str,
    url: str,
    strategies: Sequence[ProxyStrategy] = PROXY_STRATEGIES,
    timeout: float = 30,
) -> tuple[FetchResult, list[FeedEntry]]:
    """Fetch a source through the proxy chain and parse its entries.

    An unreachable source yields a failed result and no entries.
    """
    result = fetch_with_fallback(url, strategies, timeout=timeout)
    if not result.ok:
        logger.error(
            "Source %s unreachable after %d strategies: %s",
            source,
            len(strategies),
            "; ".join(result.errors),
        )
        return result, []

    entries = parse_feed(result.body, source)
    logger.info("Parsed %d entries from %s (via %s)", len(entries), source, result.strategy)
    return result, entries
