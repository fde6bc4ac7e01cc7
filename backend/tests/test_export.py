import csv
import io
from datetime import date, datetime, timezone
from types import SimpleNamespace

from liftlog.export import CSV_COLUMNS, export_filename, sessions_to_csv

def row(**kw):
    base = {c: None for c in CSV_COLUMNS}
    base.update(kw)
    return SimpleNamespace(**base)

def test_header_and_blank_cells():
    out = sessions_to_csv([row(performed_on=date(2026, 1, 5), workout_slug="push-ups",
                               set1_reps=12, set2_reps=10, compact="12/10")])
    lines = out.splitlines()
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert "id" not in lines[0].split(",")
    assert lines[1] == "2026-01-05,push-ups,,,12,10,,,,,12/10,,"

def test_quotes_commas_quotes_and_newlines():
    notes = 'tight, "left" knee\nnext time lighter'
    out = sessions_to_csv([row(performed_on=date(2026, 1, 5), workout_slug="other",
                               workout_name="Sled, heavy", notes=notes,
                               created_at=datetime(2026, 1, 5, 18, 0, tzinfo=timezone.utc))])
    parsed = list(csv.reader(io.StringIO(out)))
    assert parsed[1][CSV_COLUMNS.index("workout_name")] == "Sled, heavy"
    assert parsed[1][CSV_COLUMNS.index("notes")] == notes
    assert parsed[1][CSV_COLUMNS.index("created_at")] == "2026-01-05T18:00:00+00:00"

def test_filename():
    assert export_filename(date(2026, 1, 6)) == "workout-sessions-2026-01-06.csv"
