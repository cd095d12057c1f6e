"""Date parsing utilities for payment service payloads"""

from datetime import date, datetime
from typing import Any, Optional


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 date or timestamp ("Z" suffix allowed); None for empty or malformed input"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_date(value: Any) -> Optional[date]:
    """Calendar date of a date, datetime or ISO string; None when it cannot be determined"""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None
