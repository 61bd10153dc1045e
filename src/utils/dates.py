import math
from datetime import datetime, timedelta, timezone
from typing import Optional

ONE_DAY = timedelta(days=1)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form records are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to naive UTC.

    Aware values are converted to UTC and stripped of their tzinfo; naive
    values are assumed to already be UTC and returned unchanged.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def days_between(later: datetime, earlier: datetime) -> int:
    """
    Whole days elapsed between two instants, rounded down.

    Negative when ``earlier`` is actually after ``later``. Streak and weekly
    histogram calculations both rely on this so they round the same way.
    """
    return math.floor((as_naive_utc(later) - as_naive_utc(earlier)) / ONE_DAY)
