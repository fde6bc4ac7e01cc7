# liftlog/repositories/base.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.errors import StorageError

T = TypeVar("T")  # SQLAlchemy model type

logger = logging.getLogger(__name__)

@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def storage_errors(self, action: str) -> Iterator[None]:
        """Roll back and surface driver failures as StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("storage %s failed: %s", action, e)
            raise StorageError(f"{action} failed: {e}") from e

    def commit_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
