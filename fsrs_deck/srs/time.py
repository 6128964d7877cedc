"""UTC helpers for callers that store review timestamps.

The scheduler itself only understands "days since the last review". These
helpers turn stored timestamps into that number and turn a card's interval
back into a due date. ISO strings are UTC with second precision and a
trailing 'Z': YYYY-MM-DDTHH:MM:SSZ
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fsrs_deck.errors import InvalidElapsedDays

SECONDS_PER_DAY = 86400.0


def utc_now() -> datetime:
    """Return timezone-aware UTC 'now'."""
    return datetime.now(timezone.utc)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_datetime_to_iso_z(dt: datetime) -> str:
    """Format a datetime as UTC ISO string with second precision and trailing 'Z'."""
    dt = _as_utc(dt).replace(microsecond=0)
    return dt.isoformat().replace("+00:00", "Z")


def utc_now_iso() -> str:
    return utc_datetime_to_iso_z(utc_now())


def parse_iso_z(s: str) -> datetime:
    """Parse an ISO-8601 string ending with 'Z' (or '+00:00') into a UTC datetime."""
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(s))


def days_between(earlier: datetime | str, later: datetime | str) -> float:
    """Fractional days from ``earlier`` to ``later``.

    Naive datetimes are taken as UTC. Raises InvalidElapsedDays when
    ``later`` precedes ``earlier``.
    """
    start = parse_iso_z(earlier) if isinstance(earlier, str) else _as_utc(earlier)
    end = parse_iso_z(later) if isinstance(later, str) else _as_utc(later)
    days = (end - start).total_seconds() / SECONDS_PER_DAY
    if days < 0:
        raise InvalidElapsedDays(days)
    return days


def add_days_iso(now: datetime, days: float) -> str:
    """Due timestamp ``days`` (possibly fractional) after ``now``."""
    return utc_datetime_to_iso_z(now + timedelta(days=days))
