"""Compact display string and edit-form conversions for a logged session.

``compact`` is a one-way projection of the structured fields. It is lossy
(``"100"`` could be a weight or a single set), so nothing here ever parses it
back; edit forms are always rebuilt from the structured fields.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Iterable, assert_never

from liftlog.workouts import MAX_SETS, WorkoutKind, kind_for


# Plain ASCII decimals, optional exponent: "12", "12.5", ".5", "1e3"
_NUMBER = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str | None) -> int | None:
    """Free-text numeric input -> non-negative int, or None when unusable."""
    if text is None:
        return None
    t = text.strip()
    if not _NUMBER.fullmatch(t):
        return None
    n = float(t)
    if not math.isfinite(n):
        return None
    return math.floor(n)


def collapse_reps(reps: Iterable[int | None]) -> str:
    return "/".join(str(r) for r in reps if r is not None)


def compact_from_fields(
    kind: WorkoutKind,
    *,
    name: str | None,
    weight: int | None,
    reps: Iterable[int | None],
) -> str:
    reps_str = collapse_reps(reps)
    weight_str = "" if weight is None else str(weight)

    match kind:
        case WorkoutKind.push_ups:
            return reps_str
        case WorkoutKind.freeform:
            # "Leg Extension - 80 - 12/12/12", empty parts dropped
            parts = [(name or "").strip(), weight_str, reps_str]
            return " - ".join(p for p in parts if p)
        case WorkoutKind.weighted:
            # the dangling "80 -" matches strings already stored
            if weight_str and reps_str:
                return f"{weight_str} - {reps_str}"
            if weight_str:
                return f"{weight_str} -"
            if reps_str:
                return f"- {reps_str}"
            return ""
        case _:
            assert_never(kind)


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def reps_of(record: Any) -> list[int | None]:
    reps = _get(record, "set_reps")
    if reps is None:
        reps = [_get(record, f"set{i}_reps") for i in range(1, MAX_SETS + 1)]
    return pad_reps(reps)


def pad_reps(reps: Iterable[int | None]) -> list[int | None]:
    out = list(reps)[:MAX_SETS]
    return out + [None] * (MAX_SETS - len(out))


def compact_for(record: Any) -> str:
    """Derive ``compact`` from a record-like object or mapping."""
    return compact_from_fields(
        kind_for(_get(record, "workout_slug")),
        name=_get(record, "workout_name"),
        weight=_get(record, "weight"),
        reps=reps_of(record),
    )


def form_from_record(record: Any) -> dict[str, Any]:
    """Structured fields -> the text an edit form starts from."""
    performed_on = _get(record, "performed_on")
    weight = _get(record, "weight")
    return {
        "performed_on": performed_on.isoformat() if hasattr(performed_on, "isoformat") else str(performed_on),
        "workout_slug": _get(record, "workout_slug"),
        "workout_name": _get(record, "workout_name") or "",
        "weight": "" if weight is None else str(weight),
        "sets_text": ["" if r is None else str(r) for r in reps_of(record)],
        "notes": _get(record, "notes") or "",
    }


def fields_from_form(form: Any) -> dict[str, Any]:
    """Edit-form text -> structured fields; invalid numbers become None."""
    slug = _get(form, "workout_slug")
    name = None
    if kind_for(slug) is WorkoutKind.freeform:
        name = (_get(form, "workout_name") or "").strip() or None
    notes = (_get(form, "notes") or "").strip()
    return {
        "performed_on": _get(form, "performed_on"),
        "workout_slug": slug,
        "workout_name": name,
        "weight": parse_number(_get(form, "weight")),
        "set_reps": pad_reps(parse_number(t) for t in (_get(form, "sets_text") or [])),
        "notes": notes or None,
    }
