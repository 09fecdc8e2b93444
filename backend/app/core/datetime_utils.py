"""
Timestamp helpers. Datetimes inside stored documents are ISO 8601 strings in
UTC, e.g. 2024-10-24T14:15:00+00:00; parsing accepts any offset.
"""

from datetime import datetime, timezone
from typing import Optional


def get_now_with_timezone() -> datetime:
    """Current time as a timezone-aware datetime in the local zone."""
    return datetime.now(timezone.utc).astimezone()


def to_iso_datetime(dt: Optional[datetime]) -> Optional[str]:
    """
    Serialize a datetime as UTC so stored strings sort chronologically.
    Naive values are assumed to be UTC already.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc).isoformat()
    return dt.astimezone(timezone.utc).isoformat()


def from_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO 8601 string. A trailing 'Z' (as sent by JavaScript clients)
    is accepted. Returns None for empty or unparseable input.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
