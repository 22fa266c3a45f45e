"""
Workout database model.

One row per training session.  A workout is a *draft* until
``completed_at`` is set; completion happens once and is never undone.
"""

import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, func
from sqlmodel import Field, SQLModel

from traininglog.core.clock import local_date, utcnow


class Workout(SQLModel, table=True):
    """A single training session following one day of the plan rotation."""

    __tablename__ = "workouts"
    __table_args__ = (CheckConstraint("day_num BETWEEN 1 AND 12", name="ck_workouts_day_num"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    day_num: int = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
    completed_at: Optional[datetime.datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # User supplied, distinct from completed_at
    session_date: Optional[datetime.date] = Field(default=None, index=True)
    body_weight_kg: Optional[Decimal] = Field(default=None, max_digits=6, decimal_places=2)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def effective_date(self, tz: datetime.tzinfo) -> Optional[datetime.date]:
        """The day this session is filed under.

        ``session_date`` when given, otherwise the local date of ``completed_at``.
        Drafts without a session date have none.
        """
        if self.session_date is not None:
            return self.session_date
        return local_date(self.completed_at, tz)
