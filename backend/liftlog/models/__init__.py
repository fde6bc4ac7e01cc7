from liftlog.models.workout_session import WorkoutSession

__all__ = ["WorkoutSession"]
