"""Helper utility functions."""

import math
import secrets
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def generate_short_id(nbytes: int = 6) -> str:
    """Generate a short URL-safe identifier for a new user."""
    return secrets.token_urlsafe(nbytes)


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the way MongoDB hands dates back."""
    return to_utc_naive(datetime.now(timezone.utc))


def to_utc_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a date query value.

    Accepts ``YYYY-MM-DD`` as well as full ISO-8601 timestamps. Blank or
    missing values yield ``None``. Raises ``ValueError`` on anything else.
    """
    if value is None or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_utc_naive(datetime.fromisoformat(text))


def parse_limit(value: Optional[str]) -> Optional[int]:
    """Return the limit as a positive int, or ``None`` when it is absent or unusable."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # inf means no cap; nan is not a number at all
    if not math.isfinite(number):
        return None
    limit = int(number)
    return limit if limit > 0 else None


def filter_log(
    log: List[Dict[str, Any]],
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Slice an exercise log by date.

    Entries are sorted by date ascending, kept when ``date_from <= date < date_to``
    and then cut down to the first ``limit`` entries.
    """
    entries = sorted(log, key=lambda entry: entry["date"])
    if date_from is not None:
        entries = [e for e in entries if e["date"] >= date_from]
    if date_to is not None:
        entries = [e for e in entries if e["date"] < date_to]
    if limit is not None and limit > 0:
        entries = entries[:limit]
    return entries
