import uuid
from datetime import date, datetime

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Date, DateTime, Integer, String, Text, func
from liftlog.db import Base
from liftlog.workouts import MAX_SETS

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    performed_on: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    workout_slug: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    workout_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    weight: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set1_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set2_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set3_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set4_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set5_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    set6_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    compact: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    @property
    def set_reps(self) -> list[int | None]:
        return [getattr(self, f"set{i}_reps") for i in range(1, MAX_SETS + 1)]

    @set_reps.setter
    def set_reps(self, reps: list[int | None]) -> None:
        padded = list(reps)[:MAX_SETS] + [None] * (MAX_SETS - len(reps))
        for i, value in enumerate(padded, start=1):
            setattr(self, f"set{i}_reps", value)
