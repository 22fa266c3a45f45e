"""Pydantic schemas for form parsing and page rendering."""

from traininglog.schemas.calendar import CalendarMonth, DayCell
from traininglog.schemas.session_form import ItemEntry, SessionForm, SetValue
from traininglog.schemas.workout import (
    CheckEntry,
    NewSessionView,
    SaveResult,
    SessionDetail,
    SessionListRow,
    SetEntry,
)

__all__ = [
    "CalendarMonth",
    "DayCell",
    "ItemEntry",
    "SessionForm",
    "SetValue",
    "CheckEntry",
    "NewSessionView",
    "SaveResult",
    "SessionDetail",
    "SessionListRow",
    "SetEntry",
]
