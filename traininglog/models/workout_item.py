"""
Workout item database model.

A checklist entry (``kind='check'``) or one completed set
(``kind='sets'``) within a workout.  Rows for a ``(workout_id, label)``
pair are always replaced as a whole, never updated in place.
"""

import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, func
from sqlmodel import Field, SQLModel

from traininglog.core.clock import utcnow


class WorkoutItem(SQLModel, table=True):
    """One recorded item of a workout."""

    __tablename__ = "workout_items"
    __table_args__ = (CheckConstraint("kind IN ('check','sets')", name="ck_workout_items_kind"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: int = Field(
        sa_column=Column(Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True))
    kind: str = Field(nullable=False)
    label: str = Field(nullable=False, index=True)

    # sets only
    set_index: Optional[int] = Field(default=None)
    value_int: Optional[int] = Field(default=None)

    # check only
    checked: Optional[bool] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
