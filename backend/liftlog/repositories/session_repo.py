from __future__ import annotations
from datetime import date
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from liftlog.codec import compact_for
from liftlog.models import WorkoutSession
from liftlog.repositories.base import BaseRepository, Page
from liftlog.schemas.session import SessionFields

NEWEST_FIRST = (WorkoutSession.performed_on.desc(), WorkoutSession.created_at.desc())

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    # READS
    def get(self, session_id: str) -> Optional[WorkoutSession]:
        with self.storage_errors("read"):
            return self.db.get(WorkoutSession, session_id)

    def list_recent(self, *, limit: int = 100, offset: int = 0) -> Page[WorkoutSession]:
        stmt = select(WorkoutSession).order_by(*NEWEST_FIRST)
        with self.storage_errors("list"):
            items = self.db.execute(stmt.limit(limit).offset(offset)).scalars().all()
            total = self.db.execute(select(func.count()).select_from(WorkoutSession)).scalar_one()
        return Page(items=list(items), total=total, limit=limit, offset=offset)

    def list_all(self) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).order_by(*NEWEST_FIRST)
        with self.storage_errors("list"):
            return list(self.db.execute(stmt).scalars().all())

    def fetch_since(self, start: date) -> list[dict]:
        """Reduced {performed_on, workout_slug} projection for the completion views."""
        stmt = (
            select(WorkoutSession.performed_on, WorkoutSession.workout_slug)
            .where(WorkoutSession.performed_on >= start)
            .order_by(WorkoutSession.performed_on.asc())
        )
        with self.storage_errors("fetch"):
            return [dict(row) for row in self.db.execute(stmt).mappings()]

    def fetch_latest(self, slug: str) -> Optional[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.workout_slug == slug).order_by(*NEWEST_FIRST).limit(1)
        with self.storage_errors("fetch"):
            return self.db.execute(stmt).scalars().first()

    def fetch_series(self, slug: str, start: date) -> list[dict]:
        stmt = (
            select(
                WorkoutSession.performed_on,
                WorkoutSession.workout_slug,
                WorkoutSession.weight,
                WorkoutSession.created_at,
            )
            .where(
                WorkoutSession.workout_slug == slug,
                WorkoutSession.weight.is_not(None),
                WorkoutSession.performed_on >= start,
            )
            .order_by(WorkoutSession.performed_on.asc(), WorkoutSession.created_at.asc())
        )
        with self.storage_errors("fetch"):
            return [dict(row) for row in self.db.execute(stmt).mappings()]

    # WRITES
    def create(self, fields: SessionFields) -> WorkoutSession:
        sess = WorkoutSession()
        self._apply(sess, fields)
        with self.storage_errors("create"):
            return self.commit_and_refresh(sess)

    def update(self, session_id: str, fields: SessionFields) -> Optional[WorkoutSession]:
        sess = self.get(session_id)
        if not sess:
            return None
        self._apply(sess, fields)
        with self.storage_errors("update"):
            return self.commit_and_refresh(sess)

    def delete(self, session_id: str) -> bool:
        sess = self.get(session_id)
        if not sess:
            return False
        with self.storage_errors("delete"):
            self.db.delete(sess)
            self.db.commit()
        return True

    @staticmethod
    def _apply(sess: WorkoutSession, fields: SessionFields) -> None:
        sess.performed_on = fields.performed_on
        sess.workout_slug = fields.workout_slug
        sess.workout_name = fields.workout_name
        sess.weight = fields.weight
        sess.set_reps = fields.set_reps
        sess.notes = fields.notes
        # derived; never trusted from the caller
        sess.compact = compact_for(sess)
