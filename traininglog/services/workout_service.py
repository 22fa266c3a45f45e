"""
Workout service.

Applies posted session forms (draft save and completion), and assembles
the new-session, list and detail views.
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from traininglog.db.repositories.workout import WorkoutRepository
from traininglog.db.repositories.workout_item import WorkoutItemRepository
from traininglog.models.workout import Workout
from traininglog.plan import ItemKind, day as plan_day
from traininglog.schemas.session_form import SessionForm
from traininglog.schemas.workout import (CheckEntry, NewSessionView, SaveResult, SessionDetail, SessionListRow,
                                         SetEntry, format_date, )

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout business logic."""

    def __init__(self, session: Session, tz: datetime.tzinfo):
        self.session = session
        self.tz = tz
        self.workouts = WorkoutRepository(session)
        self.items = WorkoutItemRepository(session)

    def next_day(self) -> int:
        return self.workouts.next_day()

    def new_session(self, today: datetime.date) -> NewSessionView:
        day = self.next_day()
        items = plan_day(day)
        labels = [item.label for item in items if item.kind == ItemKind.SETS]
        prev = self.items.prev_latest_by_labels(labels)
        return NewSessionView(day=day, items=items, prev=prev, today=today)

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def save_draft(self, form: SessionForm) -> SaveResult:
        """Persist metadata and items without completing the workout."""
        try:
            result = self.apply_form(form)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("Saved draft workout %s (%d items)", result.workout_id, len(form.items))
        return result

    def complete(self, form: SessionForm) -> SaveResult:
        """Persist the form and mark the workout completed, all or nothing."""
        try:
            result = self.apply_form(form)
            affected = self.workouts.mark_completed(result.workout_id)
            if affected != 1:
                logger.error("Completing workout %s affected %d rows", result.workout_id, affected)
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="db error")
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("Completed workout %s", result.workout_id)
        return result

    def apply_form(self, form: SessionForm) -> SaveResult:
        """Create or load the workout, then write metadata and replace items per label.

        Runs inside the caller's transaction; nothing is committed here.
        """
        created = False
        if form.workout_id is None:
            if form.day is None:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing plan day")
            workout = self.workouts.create(form.day)
            created = True
            logger.info("Created workout %s for day %d", workout.id, form.day)
        else:
            workout = self._get_workout(form.workout_id)

        self.workouts.update_metadata(workout.id, session_date=form.session_date,
                                      body_weight_kg=form.body_weight_kg)
        for entry in form.items:
            self.items.replace_for_label(workout.id, entry.label, entry.kind, checked=entry.checked,
                                         values=[(v.set_index, v.value) for v in entry.values], )
        return SaveResult(workout_id=workout.id, created=created)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def list_sessions(self, limit: int = 100) -> list[SessionListRow]:
        return [SessionListRow(id=w.id, day_num=w.day_num, date=format_date(w.effective_date(self.tz)),
                               completed=w.is_completed) for w in self.workouts.list_sessions(self.tz, limit)]

    def get_detail(self, workout_id: int) -> SessionDetail:
        if workout_id <= 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
        workout = self._get_workout(workout_id)

        checks: list[CheckEntry] = []
        sets: dict[str, list[int]] = {}
        for item in self.items.list_for_workout(workout_id):
            if item.kind == ItemKind.CHECK.value:
                checks.append(CheckEntry(label=item.label, checked=bool(item.checked)))
            elif item.kind == ItemKind.SETS.value and item.set_index is not None and item.value_int is not None:
                sets.setdefault(item.label, []).append(item.value_int)

        body_weight = f"{workout.body_weight_kg:.2f}" if workout.body_weight_kg is not None else ""
        return SessionDetail(id=workout.id, day_num=workout.day_num, date=format_date(workout.effective_date(self.tz)),
                             completed=workout.is_completed, body_weight=body_weight, checks=checks,
                             sets=[SetEntry(label=label, values=values) for label, values in sets.items()], )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_workout(self, workout_id: int) -> Workout:
        workout = self.workouts.get_by_id(workout_id)
        if workout is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
        return workout
