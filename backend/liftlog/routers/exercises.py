from fastapi import APIRouter, Depends
from liftlog.deps.auth import get_current_subject
from liftlog.schemas.exercise import ExerciseRead
from liftlog.workouts import EXERCISES, TRACKED_SLUGS

router = APIRouter(prefix="/exercises", tags=["exercises"], dependencies=[Depends(get_current_subject)])

@router.get("", response_model=list[ExerciseRead])
def list_exercises():
    return [
        ExerciseRead(
            slug=e.slug,
            label=e.label,
            short_label=e.short_label,
            kind=e.kind,
            set_count=e.set_count,
            tracked=e.slug in TRACKED_SLUGS,
        )
        for e in EXERCISES
    ]
