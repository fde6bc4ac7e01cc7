"""Turns logged sessions into the dashboard views.

Every function here is pure: it takes an in-memory snapshot of rows (ORM
objects or mappings with ``performed_on`` / ``workout_slug`` and, where
relevant, ``weight`` / ``created_at``) and returns frozen structures. Rows
whose date can't be parsed are skipped rather than failing the whole view.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, Sequence

from liftlog.calendar import days_descending, month_day, try_parse_iso, weeks_descending
from liftlog.workouts import UNTRACKED_SLUGS

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 320.0
CANVAS_HEIGHT = 160.0
CANVAS_PADDING = 16.0
RANGE_PAD_RATIO = 0.08
MIN_SPREAD = 1.0
MIN_TREND_SAMPLES = 2

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class MatrixRow:
    day: date
    label: str
    cells: tuple[bool, ...]


@dataclass(frozen=True, slots=True)
class CalendarDay:
    day: date
    in_range: bool
    filled: bool

    @property
    def day_number(self) -> int | None:
        return self.day.day if self.in_range else None


@dataclass(frozen=True, slots=True)
class CalendarWeek:
    monday: date
    days: tuple[CalendarDay, ...]
    total: int


@dataclass(frozen=True, slots=True)
class WeightSample:
    day: date
    weight: int


@dataclass(frozen=True, slots=True)
class ChartPoint:
    day: date
    weight: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class WeightChart:
    slug: str
    samples: tuple[WeightSample, ...]
    points: tuple[ChartPoint, ...]
    y_min: float | None
    y_max: float | None
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT

    @property
    def enough_data(self) -> bool:
        return len(self.samples) >= MIN_TREND_SAMPLES


def _value(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def _submitted_at(row: Any) -> datetime:
    ts = _value(row, "created_at")
    if not isinstance(ts, datetime):
        return _EPOCH
    # sqlite hands back naive timestamps
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _dated(rows: Iterable[Any]) -> Iterable[tuple[date, Any]]:
    for row in rows:
        raw = _value(row, "performed_on")
        day = try_parse_iso(raw)
        if day is None:
            logger.debug("skipping row with unparseable performed_on=%r", raw)
            continue
        yield day, row


def logged_pairs(rows: Iterable[Any]) -> set[tuple[date, str]]:
    """Distinct (day, slug) pairs; duplicates in storage collapse here."""
    return {(day, _value(row, "workout_slug")) for day, row in _dated(rows)}


def completion_matrix(
    rows: Iterable[Any],
    columns: Sequence[str],
    start: date,
    today: date,
) -> tuple[MatrixRow, ...]:
    done = logged_pairs(rows)
    return tuple(
        MatrixRow(
            day=day,
            label=month_day(day),
            cells=tuple((day, slug) in done for slug in columns),
        )
        for day in days_descending(start, today)
    )


def weekly_calendar(
    rows: Iterable[Any],
    start: date,
    today: date,
    ignore: Iterable[str] = UNTRACKED_SLUGS,
) -> tuple[CalendarWeek, ...]:
    ignored = set(ignore)
    pairs = {(day, slug) for day, slug in logged_pairs(rows) if slug not in ignored}
    per_day: dict[date, int] = {}
    for day, _slug in pairs:
        per_day[day] = per_day.get(day, 0) + 1

    weeks = []
    for week in weeks_descending(start, today):
        days = tuple(
            CalendarDay(day=cell.day, in_range=cell.in_range, filled=cell.in_range and cell.day in per_day)
            for cell in week.days
        )
        total = sum(per_day.get(cell.day, 0) for cell in week.days if cell.in_range)
        weeks.append(CalendarWeek(monday=week.monday, days=days, total=total))
    return tuple(weeks)


def weight_series(rows: Iterable[Any], slug: str, start: date) -> tuple[WeightSample, ...]:
    picked = [
        (day, _submitted_at(row), _value(row, "weight"))
        for day, row in _dated(rows)
        if _value(row, "workout_slug") == slug
        and _value(row, "weight") is not None
        and day >= start
    ]
    picked.sort(key=lambda t: (t[0], t[1]))
    return tuple(WeightSample(day=day, weight=int(weight)) for day, _ts, weight in picked)


def weight_range(samples: Sequence[WeightSample]) -> tuple[float, float]:
    """Observed min/max padded by 8% of the spread (spread floored at 1)."""
    lo = min(s.weight for s in samples)
    hi = max(s.weight for s in samples)
    spread = max(hi - lo, MIN_SPREAD)
    pad = spread * RANGE_PAD_RATIO
    return lo - pad, hi + pad


def project_weights(
    samples: Sequence[WeightSample],
    *,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    padding: float = CANVAS_PADDING,
) -> tuple[ChartPoint, ...]:
    if not samples:
        return ()
    y_min, y_max = weight_range(samples)
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    last = len(samples) - 1

    points = []
    for i, s in enumerate(samples):
        x = padding + (inner_w * i / last if last else inner_w / 2)
        # SVG-style: larger weights sit higher, i.e. smaller y
        y = padding + (y_max - s.weight) / (y_max - y_min) * inner_h
        points.append(ChartPoint(day=s.day, weight=s.weight, x=round(x, 2), y=round(y, 2)))
    return tuple(points)


def weight_chart(rows: Iterable[Any], slug: str, start: date) -> WeightChart:
    samples = weight_series(rows, slug, start)
    if len(samples) < MIN_TREND_SAMPLES:
        return WeightChart(slug=slug, samples=samples, points=(), y_min=None, y_max=None)
    y_min, y_max = weight_range(samples)
    return WeightChart(
        slug=slug,
        samples=samples,
        points=project_weights(samples),
        y_min=round(y_min, 2),
        y_max=round(y_max, 2),
    )


def latest_session(rows: Iterable[Any], slug: str) -> Any | None:
    """Most recent row for ``slug``; same-day ties go to the later submission."""
    best = None
    best_key = None
    for day, row in _dated(rows):
        if _value(row, "workout_slug") != slug:
            continue
        key = (day, _submitted_at(row))
        if best_key is None or key > best_key:
            best, best_key = row, key
    return best


def latest_by_exercise(rows: Iterable[Any]) -> dict[str, Any]:
    best: dict[str, tuple[tuple[date, datetime], Any]] = {}
    for day, row in _dated(rows):
        slug = _value(row, "workout_slug")
        key = (day, _submitted_at(row))
        if slug not in best or key > best[slug][0]:
            best[slug] = (key, row)
    return {slug: row for slug, (_key, row) in best.items()}


def group_by_day(rows: Iterable[Any]) -> list[tuple[date, list[Any]]]:
    """Group rows by day, keeping first-seen day order and row order."""
    groups: dict[date, list[Any]] = {}
    for day, row in _dated(rows):
        groups.setdefault(day, []).append(row)
    return list(groups.items())
