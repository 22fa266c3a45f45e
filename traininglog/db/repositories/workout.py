"""
Workout repository.

Handles database operations for :class:`Workout`.  Methods flush but never
commit: the caller's session is the transaction.
"""

import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_, func, or_, update
from sqlmodel import Session, select

from traininglog.core.clock import local_midnight_utc, utcnow
from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem
from traininglog.plan import next_in_rotation


class WorkoutRepository:
    """Repository for Workout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, workout_id: int) -> Optional[Workout]:
        return self.session.get(Workout, workout_id)

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def last_completed_day(self) -> Optional[int]:
        statement = (select(Workout.day_num).where(Workout.completed_at.is_not(None))
                     .order_by(Workout.completed_at.desc(), Workout.id.desc()).limit(1))
        return self.session.exec(statement).first()

    def next_day(self) -> int:
        return next_in_rotation(self.last_completed_day())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create(self, day_num: int) -> Workout:
        entry = Workout(day_num=day_num)
        self.session.add(entry)
        self.session.flush()
        return entry

    def update_metadata(self, workout_id: int, session_date: Optional[datetime.date] = None,
                        body_weight_kg: Optional[Decimal] = None, ) -> int:
        """Set the supplied fields only; ``None`` means "leave as is"."""
        values = {}
        if session_date is not None:
            values["session_date"] = session_date
        if body_weight_kg is not None:
            values["body_weight_kg"] = body_weight_kg
        if not values:
            return 0
        result = self.session.execute(update(Workout).where(Workout.id == workout_id).values(**values))
        return result.rowcount

    def mark_completed(self, workout_id: int, completed_at: Optional[datetime.datetime] = None) -> int:
        """Stamp ``completed_at`` unless it is already set.  Returns the number of rows matched.

        A workout that is already completed keeps its first timestamp.
        """
        stamp = func.coalesce(Workout.completed_at, completed_at or utcnow())
        result = self.session.execute(update(Workout).where(Workout.id == workout_id).values(completed_at=stamp))
        return result.rowcount

    # ------------------------------------------------------------------
    # History queries
    # ------------------------------------------------------------------

    def completed_in_month(self, month_start: datetime.date, month_end: datetime.date,
                           tz: datetime.tzinfo, ) -> list[Workout]:
        """Completed workouts whose effective date falls in ``[month_start, month_end)``.

        Workouts without a session date are matched on the UTC instants
        bounding the local month, which is the same as comparing the local
        date of ``completed_at``.
        """
        start_utc = local_midnight_utc(month_start, tz)
        end_utc = local_midnight_utc(month_end, tz)
        statement = select(Workout).where(
            Workout.completed_at.is_not(None),
            or_(and_(Workout.session_date.is_not(None), Workout.session_date >= month_start,
                     Workout.session_date < month_end, ),
                and_(Workout.session_date.is_(None), Workout.completed_at >= start_utc,
                     Workout.completed_at < end_utc, ), ), )
        return list(self.session.exec(statement).all())

    def calendar_counts(self, month_start: datetime.date, month_end: datetime.date,
                        tz: datetime.tzinfo, ) -> dict[datetime.date, int]:
        """Number of completed workouts per local day of the month."""
        counts: dict[datetime.date, int] = {}
        for workout in self.completed_in_month(month_start, month_end, tz):
            key = workout.effective_date(tz)
            if key is None or not month_start <= key < month_end:
                continue
            counts[key] = counts.get(key, 0) + 1
        return counts

    def list_sessions(self, tz: datetime.tzinfo, limit: int = 100) -> list[Workout]:
        """Most recent workouts by effective date (drafts without a date last), newest id first on ties.

        The effective date depends on the local timezone, so ordering happens
        here rather than in SQL.  A single user's history stays small.
        """
        workouts = self.session.exec(select(Workout).order_by(Workout.id.desc())).all()

        def sort_key(workout: Workout):
            effective = workout.effective_date(tz)
            return (effective is None, -(effective.toordinal() if effective else 0), -workout.id)

        return sorted(workouts, key=sort_key)[:limit]

    def export_rows(self) -> list[tuple[Workout, Optional[WorkoutItem]]]:
        """Every workout joined with its items; item-less workouts appear once with ``None``."""
        statement = (select(Workout, WorkoutItem)
                     .outerjoin(WorkoutItem, WorkoutItem.workout_id == Workout.id)
                     .order_by(Workout.id.desc(), WorkoutItem.label.asc().nulls_last(),
                               WorkoutItem.set_index.asc().nulls_last()))
        return list(self.session.exec(statement).all())
