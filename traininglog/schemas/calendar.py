"""Calendar view schemas."""

import datetime

from pydantic import BaseModel


class DayCell(BaseModel):
    """One square of the month grid."""

    date: datetime.date
    in_month: bool
    completed: bool
    count: int = 0


class CalendarMonth(BaseModel):
    title: str
    prev_ym: str
    next_ym: str
    cells: list[DayCell]
