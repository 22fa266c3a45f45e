"""
Workout view schemas.

What the HTML pages render: session list rows, session detail and the
new-session page.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from traininglog.plan import PlanItem


class SaveResult(BaseModel):
    """Outcome of applying a session form."""

    workout_id: int
    created: bool = Field(False, description="True when this save created the workout")


class SessionListRow(BaseModel):
    id: int
    day_num: int
    date: str = Field("", description="Effective date as YYYY-MM-DD, blank for undated drafts")
    completed: bool


class CheckEntry(BaseModel):
    label: str
    checked: bool


class SetEntry(BaseModel):
    label: str
    values: list[int]


class SessionDetail(BaseModel):
    """A workout with its recorded items split by kind."""

    id: int
    day_num: int
    date: str = ""
    completed: bool
    body_weight: str = Field("", description="Two-decimal kilograms, blank when not recorded")
    checks: list[CheckEntry] = Field(default_factory=list)
    sets: list[SetEntry] = Field(default_factory=list)


class NewSessionView(BaseModel):
    """Everything the new-session form needs."""

    day: int
    items: list[PlanItem]
    workout_id: int = 0
    prev: dict[str, list[int]] = Field(default_factory=dict, description="Last completed values per label")
    today: datetime.date


def format_date(value: Optional[datetime.date]) -> str:
    return value.isoformat() if value else ""
