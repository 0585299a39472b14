"""Conversion of alert-channel payloads into AlertEvents."""

import json
from datetime import datetime, timezone
from typing import Any

from aggregate_alerts.models import AlertEvent, AlertKind
from common.datetime import parse_epoch

DEFAULT_ALERT_TITLE = "Missile Attack"


class InvalidAlertPayload(ValueError):
    """Payload is not a JSON object of the expected shape."""


def decode_alert_payload(text: str) -> dict[str, Any]:
    """Decode a JSON alert body. Raises InvalidAlertPayload."""
    # The alert endpoint prefixes its body with a byte order mark
    text = text.lstrip("\ufeff").strip()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidAlertPayload(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidAlertPayload("alert payload is not an object")
    return payload


def alert_event_from_payload(
    payload: dict[str, Any], kind: AlertKind, received_at: datetime | None = None
) -> AlertEvent:
    """Build an AlertEvent from `{title, data: [places], timestamp?}`."""
    places = payload.get("data") or []
    if isinstance(places, str):
        places = [places]
    if not isinstance(places, list):
        raise InvalidAlertPayload("alert data is not a list of places")

    timestamp = parse_epoch(payload.get("timestamp")) or received_at or datetime.now(timezone.utc)

    return AlertEvent(
        kind=kind,
        title=str(payload.get("title") or DEFAULT_ALERT_TITLE),
        places=[str(place) for place in places if str(place).strip()],
        timestamp=timestamp,
    )
