"""JSONL export of pipeline records."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from common.serialization import serialize_dataclass

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"


def save_jsonl_records_local(
    records: Iterable[Any],
    prefix: str,
    output_dir: str = "output",
    written_at: datetime | None = None,
) -> Path:
    """
    Write dataclass records to `<output_dir>/<prefix>_<UTC timestamp>.jsonl`.

    Args:
        records: Dataclass instances, one JSON object per line
        prefix: Filename prefix (e.g., "news_items", "alert_log")
        output_dir: Target directory, created if missing
        written_at: Timestamp used in the filename (default: now)

    Returns:
        Path to the written file
    """
    written_at = written_at or datetime.now(timezone.utc)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    filepath = output_path / f"{prefix}_{written_at.strftime(TIMESTAMP_FORMAT)}.jsonl"

    count = 0
    with filepath.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(serialize_dataclass(record), default=str, ensure_ascii=False) + "\n")
            count += 1

    logger.info("Saved %d records to %s", count, filepath)
    return filepath
