"""Date helpers for the dashboard views.

Everything here works on ``datetime.date`` so there is no time-of-day drift;
the only place a clock and a zone are involved is :func:`today`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterator
from zoneinfo import ZoneInfo

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True, slots=True)
class DayCell:
    day: date
    in_range: bool


@dataclass(frozen=True, slots=True)
class WeekRow:
    monday: date
    days: tuple[DayCell, ...]


def today(tz: str, *, now: datetime | None = None) -> date:
    """Calendar date in the named zone ``tz``, regardless of the host zone.

    ``now`` must be timezone-aware when given; it is converted into ``tz``.
    """
    zone = ZoneInfo(tz)
    current = now.astimezone(zone) if now is not None else datetime.now(zone)
    return current.date()


def today_iso(tz: str, *, now: datetime | None = None) -> str:
    return to_iso(today(tz, now=now))


def parse_iso(value: Any) -> date:
    """Parse ``YYYY-MM-DD`` (or pass a date through). Raises ValueError."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not an ISO date: {value!r}")
    text = value.strip()
    if not _ISO_DATE.fullmatch(text):
        raise ValueError(f"not an ISO date: {value!r}")
    return date.fromisoformat(text)


def try_parse_iso(value: Any) -> date | None:
    try:
        return parse_iso(value)
    except ValueError:
        return None


def to_iso(d: date) -> str:
    return d.isoformat()


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def monday_of(d: date) -> date:
    # weekday(): Monday=0 .. Sunday=6
    return add_days(d, -d.weekday())


def days_descending(start: date, end: date) -> Iterator[date]:
    """Yield ``end`` back to ``start``, both inclusive."""
    d = end
    while d >= start:
        yield d
        d = add_days(d, -1)


def weeks_descending(start: date, today: date) -> Iterator[WeekRow]:
    """Full Monday..Sunday weeks from the week of ``today`` back to the week of ``start``.

    Days outside ``[start, today]`` stay in the row, flagged out of range.
    """
    first_monday = monday_of(start)
    monday = monday_of(today)
    while monday >= first_monday:
        days = tuple(
            DayCell(day, start <= day <= today)
            for day in (add_days(monday, i) for i in range(7))
        )
        yield WeekRow(monday=monday, days=days)
        monday = add_days(monday, -7)


def month_day(d: date) -> str:
    return f"{d.month}/{d.day}"

