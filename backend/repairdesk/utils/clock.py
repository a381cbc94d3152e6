from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    """Naive UTC timestamp; all DateTime columns hold naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def day_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """[start of today, start of tomorrow)"""
    now = now or utcnow()
    start = datetime.combine(now.date(), time.min)
    return start, start + timedelta(days=1)


def month_start(now: Optional[datetime] = None) -> datetime:
    now = now or utcnow()
    return datetime(now.year, now.month, 1)


def parse_bound(raw: str, end_of_day: bool = False) -> datetime:
    """
    Parse an ISO date or datetime string into a naive UTC datetime.
    A bare date maps to 00:00, or to the last microsecond of the day when end_of_day is set.
    Raises ValueError on anything unparseable.
    """
    raw = raw.strip()
    if len(raw) == 10:
        d = date.fromisoformat(raw)
        return datetime.combine(d, time.max if end_of_day else time.min)
    dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt
