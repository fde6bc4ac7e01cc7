from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.aggregation import completion_matrix, weekly_calendar, weight_chart
from liftlog.db import get_db
from liftlog.deps.auth import get_current_subject
from liftlog.deps.context import get_preferences, get_today
from liftlog.preferences import Preferences
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.dashboard import (
    CalendarRead,
    CalendarWeekRead,
    ChartPointRead,
    MatrixColumn,
    MatrixRead,
    MatrixRowRead,
    WeightSeriesRead,
)
from liftlog.settings import Settings, get_settings
from liftlog.workouts import TRACKED_SLUGS, exercise_for

router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_subject)])

def _start(start: date | None, settings: Settings) -> date:
    return start or settings.TRACKING_START

@router.get("/matrix", response_model=MatrixRead)
def consistency_matrix(
    start: date | None = Query(None, description="defaults to TRACKING_START"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
):
    start = _start(start, settings)
    pairs = SessionRepository(db).fetch_since(start)
    rows = completion_matrix(pairs, TRACKED_SLUGS, start, today)
    return MatrixRead(
        start=start,
        today=today,
        columns=[MatrixColumn(slug=s, short_label=exercise_for(s).short_label) for s in TRACKED_SLUGS],
        rows=[MatrixRowRead.model_validate(r) for r in rows],
    )

@router.get("/calendar", response_model=CalendarRead)
def any_workout_calendar(
    start: date | None = Query(None, description="defaults to TRACKING_START"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
):
    start = _start(start, settings)
    pairs = SessionRepository(db).fetch_since(start)
    weeks = weekly_calendar(pairs, start, today)
    return CalendarRead(
        start=start,
        today=today,
        weeks=[CalendarWeekRead.model_validate(w) for w in weeks],
    )

@router.get("/series", response_model=WeightSeriesRead)
def weight_series(
    slug: str | None = Query(None, description="defaults to the last exercise picked"),
    start: date | None = Query(None, description="defaults to TRACKING_START"),
    db: Session = Depends(get_db),
    prefs: Preferences = Depends(get_preferences),
    settings: Settings = Depends(get_settings),
):
    slug = slug or prefs.last_exercise
    if not slug:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Pick an exercise")
    prefs.remember_exercise(slug)

    start = _start(start, settings)
    chart = weight_chart(SessionRepository(db).fetch_series(slug, start), slug, start)
    weights = [s.weight for s in chart.samples]
    return WeightSeriesRead(
        slug=slug,
        start=start,
        status="ok" if chart.enough_data else "insufficient_data",
        sample_count=len(chart.samples),
        min_weight=min(weights, default=None),
        max_weight=max(weights, default=None),
        y_min=chart.y_min,
        y_max=chart.y_max,
        width=chart.width,
        height=chart.height,
        points=[ChartPointRead.model_validate(p) for p in chart.points],
    )
