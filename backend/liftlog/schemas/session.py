from typing import Annotated
from datetime import date, datetime
from pydantic import BaseModel, Field, StringConstraints, field_validator, model_validator

from liftlog.workouts import MAX_SETS, WorkoutKind, exercise_for

SlugStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64, pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")]
NameStr = Annotated[str, Field(max_length=120)]
# Stored in 32-bit integer columns
MAX_STORED_INT = 2_147_483_647
NonNegInt = Annotated[int, Field(ge=0, le=MAX_STORED_INT)]
# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class SessionFields(BaseModel):
    """A complete, validated session as it is written to storage."""
    performed_on: date
    workout_slug: SlugStr
    workout_name: NameStr | None = None
    weight: NonNegInt | None = None
    set_reps: list[NonNegInt | None] = Field(default_factory=lambda: [None] * MAX_SETS, max_length=MAX_SETS)
    notes: NotesStr | None = None

    @field_validator("set_reps")
    @classmethod
    def pad_to_six(cls, v: list[int | None]) -> list[int | None]:
        return v + [None] * (MAX_SETS - len(v))

    @field_validator("notes")
    @classmethod
    def blank_notes_are_none(cls, v: str | None) -> str | None:
        return v or None

    @model_validator(mode="after")
    def check_kind_rules(self) -> "SessionFields":
        exercise = exercise_for(self.workout_slug)
        if exercise.kind is WorkoutKind.freeform:
            name = (self.workout_name or "").strip()
            if not name:
                raise ValueError("workout_name is required for freeform sessions")
            self.workout_name = name
        else:
            self.workout_name = None

        extra = [r for r in self.set_reps[exercise.set_count:] if r is not None]
        if extra:
            raise ValueError(f"{exercise.slug} takes at most {exercise.set_count} sets")
        return self


class SessionCreate(SessionFields):
    @model_validator(mode="after")
    def something_to_log(self) -> "SessionCreate":
        any_reps = any(r is not None for r in self.set_reps)
        if exercise_for(self.workout_slug).kind is WorkoutKind.push_ups:
            if not any_reps:
                raise ValueError("log at least one set")
        elif not any_reps and self.weight is None:
            raise ValueError("log a weight or at least one set")
        return self


class SessionUpdate(BaseModel):
    # Patch: only the fields sent are merged, then revalidated as SessionFields
    performed_on: date | None = None
    workout_slug: SlugStr | None = None
    workout_name: NameStr | None = None
    weight: NonNegInt | None = None
    set_reps: list[NonNegInt | None] | None = Field(default=None, max_length=MAX_SETS)
    notes: NotesStr | None = None


class SessionRead(BaseModel):
    id: str
    performed_on: date
    workout_slug: str
    workout_name: str | None = None
    weight: int | None = None
    set_reps: list[int | None]
    compact: str
    notes: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class SessionPage(BaseModel):
    items: list[SessionRead]
    total: int
    limit: int
    offset: int


class SessionDay(BaseModel):
    day: date
    sessions: list[SessionRead]


class SessionForm(BaseModel):
    """Edit-form text, exactly as typed."""
    performed_on: str
    workout_slug: str
    workout_name: str = ""
    weight: str = ""
    sets_text: list[str] = Field(default_factory=lambda: [""] * MAX_SETS, max_length=MAX_SETS)
    notes: str = ""


class CompactPreview(BaseModel):
    compact: str
