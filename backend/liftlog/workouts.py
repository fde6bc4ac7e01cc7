from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_SETS = 6
DEFAULT_SET_COUNT = 3

FREEFORM_SLUG = "other"
PUSH_UPS_SLUG = "push-ups"


class WorkoutKind(str, Enum):
    push_ups = "push_ups"
    weighted = "weighted"
    freeform = "freeform"


@dataclass(frozen=True, slots=True)
class Exercise:
    slug: str
    label: str
    short_label: str
    kind: WorkoutKind = WorkoutKind.weighted
    set_count: int = DEFAULT_SET_COUNT


EXERCISES: tuple[Exercise, ...] = (
    Exercise(PUSH_UPS_SLUG, "Push Ups", "PU", WorkoutKind.push_ups, MAX_SETS),
    Exercise("bicep-curls", "Bicep Curls", "BC"),
    Exercise("shoulder-press", "Shoulder Press", "SP"),
    Exercise("chest-press", "Chest Press", "CP"),
    Exercise("lateral-raise", "Lateral Raise", "LR"),
    Exercise("tricep-extension", "Tricep Extension", "TE"),
    Exercise("lat-pulldown", "Lat Pulldown", "LP"),
    Exercise("row", "Row", "RW"),
    Exercise("rear-delt-fly", "Rear Delt Fly", "RD"),
    Exercise(FREEFORM_SLUG, "Other", "OT", WorkoutKind.freeform),
    Exercise("leg-press", "Leg Press", "LPr", set_count=4),
    Exercise("leg-curl", "Leg Curl", "LC"),
)

_BY_SLUG = {e.slug: e for e in EXERCISES}

# Column order of the consistency matrix
TRACKED_SLUGS: tuple[str, ...] = (
    PUSH_UPS_SLUG,
    "bicep-curls",
    "shoulder-press",
    "chest-press",
    "lat-pulldown",
    "row",
    "leg-press",
    "leg-curl",
    "lateral-raise",
)

# Freeform entries don't count toward the "any workout" calendar
UNTRACKED_SLUGS: tuple[str, ...] = (FREEFORM_SLUG,)


def titleize_slug(slug: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in slug.split("-"))


def exercise_for(slug: str) -> Exercise:
    """Catalog entry for ``slug``; unknown slugs are plain weighted lifts."""
    known = _BY_SLUG.get(slug)
    if known is not None:
        return known
    label = titleize_slug(slug)
    return Exercise(slug, label, label[:3])


def kind_for(slug: str) -> WorkoutKind:
    return exercise_for(slug).kind
