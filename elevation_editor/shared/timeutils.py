"""
Timestamp helpers for GPX sample times.
"""
from datetime import datetime, timezone
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[float]:
    """
    Parse an ISO-8601 timestamp into milliseconds since the epoch.

    A trailing 'Z' is accepted. Naive timestamps are taken as UTC.

    Returns:
        Milliseconds since epoch, or None if missing or unparsable
    """
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed.timestamp() * 1000


def to_isoformat(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ISO-8601 with a 'Z' suffix for UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
