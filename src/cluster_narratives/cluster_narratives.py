"""Group items by the fixed topic taxonomy."""

import logging
from typing import Mapping, Sequence

from cluster_narratives.models import NarrativeCluster
from cluster_narratives.topics import MAX_CLUSTER_MEMBERS, MIN_CLUSTER_MEMBERS, NARRATIVE_TOPICS
from common.utils import build_item_text
from fetch_feeds.models import NewsItem

logger = logging.getLogger(__name__)


def cluster_narratives(
    items: Sequence[NewsItem],
    topics: Mapping[str, Sequence[str]] = NARRATIVE_TOPICS,
    max_members: int = MAX_CLUSTER_MEMBERS,
    min_members: int = MIN_CLUSTER_MEMBERS,
) -> list[NarrativeCluster]:
    """
    Build narrative clusters from corpus items.

    Args:
        items: Corpus items, newest first
        topics: Topic name to keywords; iteration order is output order
        max_members: Maximum items kept per topic (first matches in corpus order)
        min_members: Topics with fewer matches are left out entirely

    Returns:
        List of NarrativeCluster in topic order
    """
    texts = [(item, build_item_text(item)) for item in items]
    clusters = []

    for topic, keywords in topics.items():
        members = []
        for item, text in texts:
            if any(keyword in text for keyword in keywords):
                members.append(item)
                if len(members) == max_members:
                    break

        if len(members) < min_members:
            continue

        clusters.append(NarrativeCluster(topic=topic, keywords=tuple(keywords), items=tuple(members)))

    logger.info("Built %d narrative clusters", len(clusters))
    return clusters
