"""Small per-device state: the last chosen exercise and unsaved form drafts.

Nothing here is global; callers pass a :class:`KeyValueStore` in.
"""
from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from liftlog.workouts import MAX_SETS

LAST_EXERCISE_KEY = "last_exercise_v1"


def draft_key(slug: str) -> str:
    return f"draft_{slug}_v1"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """One JSON object on disk. Writes replace the file atomically; last write wins.

    Read-modify-write cycles are serialized per instance.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._dump(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(key, None) is not None:
                self._dump(data)


class SessionDraft(BaseModel):
    workout_name: str = ""
    weight: str = ""
    sets_text: list[str] = Field(default_factory=lambda: [""] * MAX_SETS, max_length=MAX_SETS)
    notes: str = ""

    def is_blank(self) -> bool:
        texts = [self.workout_name, self.weight, self.notes, *self.sets_text]
        return all(not t.strip() for t in texts)


class Preferences:
    def __init__(self, store: KeyValueStore):
        self.store = store

    @property
    def last_exercise(self) -> str | None:
        return self.store.get(LAST_EXERCISE_KEY)

    def remember_exercise(self, slug: str) -> None:
        self.store.set(LAST_EXERCISE_KEY, slug)

    def load_draft(self, slug: str) -> SessionDraft | None:
        raw = self.store.get(draft_key(slug))
        if raw is None:
            return None
        try:
            return SessionDraft.model_validate_json(raw)
        except ValidationError:
            # unreadable draft: start over rather than block the form
            self.store.delete(draft_key(slug))
            return None

    def save_draft(self, slug: str, draft: SessionDraft) -> None:
        if draft.is_blank():
            self.clear_draft(slug)
            return
        self.store.set(draft_key(slug), draft.model_dump_json())

    def clear_draft(self, slug: str) -> None:
        self.store.delete(draft_key(slug))
