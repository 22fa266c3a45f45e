"""
Calendar service.

Month selection from the ``ym`` query parameter and the Sunday-first,
six-week grid of day cells.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from traininglog.db.repositories.workout import WorkoutRepository
from traininglog.schemas.calendar import CalendarMonth, DayCell

GRID_DAYS = 42


def month_from_query(ym: Optional[str], today: datetime.date) -> datetime.date:
    """First day of the month named by ``YYYY-MM``; the current month when missing or malformed."""
    if ym and len(ym) == 7:
        try:
            return datetime.datetime.strptime(ym, "%Y-%m").date()
        except ValueError:
            pass
    return today.replace(day=1)


def add_months(month: datetime.date, delta: int) -> datetime.date:
    index = month.year * 12 + (month.month - 1) + delta
    return datetime.date(index // 12, index % 12 + 1, 1)


def month_bounds(month: datetime.date) -> tuple[datetime.date, datetime.date]:
    """``[first day, first day of next month)``."""
    start = month.replace(day=1)
    return start, add_months(start, 1)


def build_cells(month: datetime.date, counts: dict[datetime.date, int]) -> list[DayCell]:
    """Six full weeks starting on the Sunday on or before the 1st."""
    start = month.replace(day=1)
    # date.weekday(): Monday=0 ... Sunday=6
    grid_start = start - datetime.timedelta(days=(start.weekday() + 1) % 7)
    cells = []
    for offset in range(GRID_DAYS):
        d = grid_start + datetime.timedelta(days=offset)
        count = counts.get(d, 0)
        cells.append(DayCell(date=d, in_month=d.month == start.month, completed=count > 0, count=count))
    return cells


class CalendarService:
    """Builds the month view from completed workouts."""

    def __init__(self, session: Session, tz: datetime.tzinfo):
        self.repository = WorkoutRepository(session)
        self.tz = tz

    def month(self, ym: Optional[str], today: datetime.date) -> CalendarMonth:
        month = month_from_query(ym, today)
        start, end = month_bounds(month)
        counts = self.repository.calendar_counts(start, end, self.tz)
        return CalendarMonth(title=month.strftime("%B %Y"), prev_ym=add_months(month, -1).strftime("%Y-%m"),
                             next_ym=add_months(month, 1).strftime("%Y-%m"), cells=build_cells(month, counts), )
