from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_local_datetime(value: str) -> datetime:
    """Parse an HTML ``datetime-local`` / ISO-8601 value into a naive datetime.

    Accepts ``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM`` and ``YYYY-MM-DD HH:MM:SS``.
    Offsets are dropped: all datetimes are local, timezone-less values.
    """

    v = value.strip()
    if len(v) == 10:
        return datetime.combine(parse_iso_date(v), time())
    parsed = datetime.fromisoformat(v.replace(" ", "T", 1))
    return parsed.replace(tzinfo=None)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time())
