"""
CSV export service.

One CSV row per workout item, with the owning workout's metadata repeated
on every row.  Null values are written as empty strings.
"""

import csv
import datetime
import io
from typing import Iterable, Iterator, Optional

from sqlmodel import Session

from traininglog.core.clock import as_utc
from traininglog.db.repositories.workout import WorkoutRepository
from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem

EXPORT_FILENAME = "traininglog_export.csv"

CSV_HEADER = [
    "workout_id", "day_num", "session_date", "body_weight_kg", "completed_at",
    "kind", "label", "set_index", "value_int", "checked",
]


def _text(value) -> str:
    return "" if value is None else str(value)


def format_row(workout: Workout, item: Optional[WorkoutItem], tz: datetime.tzinfo) -> list[str]:
    """CSV cells for one ``(workout, item)`` pair."""
    session_date = workout.session_date.isoformat() if workout.session_date else ""
    body_weight = f"{workout.body_weight_kg:.2f}" if workout.body_weight_kg is not None else ""
    completed_at = ""
    if workout.completed_at is not None:
        completed_at = as_utc(workout.completed_at).astimezone(tz).isoformat(timespec="seconds")

    kind = label = set_index = value_int = checked = ""
    if item is not None:
        kind = item.kind
        label = item.label
        set_index = _text(item.set_index)
        value_int = _text(item.value_int)
        if item.checked is not None:
            checked = "true" if item.checked else "false"

    return [str(workout.id), str(workout.day_num), session_date, body_weight, completed_at,
            kind, label, set_index, value_int, checked, ]


def iter_csv(rows: Iterable[list[str]]) -> Iterator[str]:
    """Yield the header line, then one CSV line per formatted row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    def flush() -> str:
        data = buffer.getvalue()
        buffer.seek(0)
        buffer.truncate(0)
        return data

    writer.writerow(CSV_HEADER)
    yield flush()
    for row in rows:
        writer.writerow(row)
        yield flush()


class ExportService:
    def __init__(self, session: Session, tz: datetime.tzinfo):
        self.repository = WorkoutRepository(session)
        self.tz = tz

    def rows(self) -> list[list[str]]:
        """Formatted CSV rows, read in full before anything is streamed."""
        return [format_row(workout, item, self.tz) for workout, item in self.repository.export_rows()]
