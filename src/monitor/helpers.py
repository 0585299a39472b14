"""Helper functions for the monitor CLI."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone

from common.local_io import save_jsonl_records_local
from monitor.models import PipelineSnapshot

logger = logging.getLogger(__name__)


def parse_monitor_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the monitor."""

    parser = argparse.ArgumentParser(description="Monitor conflict news feeds and alerts.")

    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file. Defaults to $MONITOR_CONFIG or 'prod'",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single fetch cycle and exit",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the pipeline output over HTTP while monitoring",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save each cycle's output to local files")

    return parser.parse_args(argv)


def save_snapshot_local(snapshot: PipelineSnapshot, output_dir: str) -> None:
    """Write the snapshot's record collections as JSONL files sharing one timestamp."""
    written_at = datetime.now(timezone.utc)
    save_jsonl_records_local(snapshot.items, "news_items", output_dir, written_at)
    save_jsonl_records_local(snapshot.clusters, "narrative_clusters", output_dir, written_at)
    save_jsonl_records_local(snapshot.alerts, "alert_log", output_dir, written_at)
    save_jsonl_records_local(snapshot.strikes, "strike_records", output_dir, written_at)
    save_jsonl_records_local([snapshot.escalation], "escalation", output_dir, written_at)


def log_snapshot(snapshot: PipelineSnapshot) -> None:
    logger.info(
        "Escalation %d (%s) | defense %s | %d items | %d alerts | %d strikes",
        snapshot.escalation.score,
        snapshot.escalation.tier.value,
        snapshot.defense_status.value,
        len(snapshot.items),
        len(snapshot.alerts),
        len(snapshot.strikes),
    )
    for cluster in snapshot.clusters:
        logger.info("  %s | %s", cluster.topic, " / ".join(item.title for item in cluster.items))
    for sentence in snapshot.briefing:
        logger.info("  - %s", sentence)
