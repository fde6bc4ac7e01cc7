import csv
import io
from datetime import date
from typing import Any, Iterable

# Stable column order (no ids)
CSV_COLUMNS = (
    "performed_on",
    "workout_slug",
    "workout_name",
    "weight",
    "set1_reps",
    "set2_reps",
    "set3_reps",
    "set4_reps",
    "set5_reps",
    "set6_reps",
    "compact",
    "notes",
    "created_at",
)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def sessions_to_csv(rows: Iterable[Any]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for row in rows:
        writer.writerow([_cell(getattr(row, col, None)) for col in CSV_COLUMNS])
    return buf.getvalue()


def export_filename(today: date) -> str:
    return f"workout-sessions-{today.isoformat()}.csv"
