"""UTC helpers. The database stores TIMESTAMP WITHOUT TIME ZONE, so all
datetimes inside the application are naive UTC."""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Raises ValueError when the UTC equivalent falls outside the calendar."""
    if value.tzinfo is not None:
        try:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise ValueError(f"{value.isoformat()} is out of range in UTC")
    return value


def years_ago(now: datetime, years: int) -> datetime:
    """Calendar subtraction; Feb 29 falls back to Feb 28."""
    try:
        return now.replace(year=now.year - years)
    except ValueError:
        return now.replace(year=now.year - years, day=28)


def day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Start (inclusive) and end (exclusive) of the UTC calendar day containing ``now``."""
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)
