from pydantic import BaseModel

from liftlog.workouts import WorkoutKind


class ExerciseRead(BaseModel):
    slug: str
    label: str
    short_label: str
    kind: WorkoutKind
    set_count: int
    tracked: bool

    model_config = {"from_attributes": True}
