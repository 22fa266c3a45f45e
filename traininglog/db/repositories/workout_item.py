"""
Workout item repository.

Handles database operations for :class:`WorkoutItem`, including the
"previous values" lookup used to pre-fill the new-session form.
"""

from typing import Iterable

from sqlalchemy import delete, func
from sqlmodel import Session, select

from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem
from traininglog.plan import ItemKind


class WorkoutItemRepository:
    """Repository for WorkoutItem database operations."""

    def __init__(self, session: Session):
        self.session = session

    def list_for_workout(self, workout_id: int) -> list[WorkoutItem]:
        statement = (select(WorkoutItem).where(WorkoutItem.workout_id == workout_id)
                     .order_by(WorkoutItem.kind, WorkoutItem.label, WorkoutItem.set_index))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def replace_for_label(self, workout_id: int, label: str, kind: ItemKind, checked: bool = False,
                          values: Iterable[tuple[int, int]] = (), ) -> list[WorkoutItem]:
        """Make the stored rows for ``(workout_id, label)`` exactly the given ones.

        ``check`` items store a single row carrying ``checked``; ``sets``
        items store one row per ``(set_index, value)`` pair.
        """
        self.session.execute(
            delete(WorkoutItem).where(WorkoutItem.workout_id == workout_id, WorkoutItem.label == label))

        if kind == ItemKind.CHECK:
            entries = [WorkoutItem(workout_id=workout_id, kind=ItemKind.CHECK.value, label=label, checked=checked)]
        elif kind == ItemKind.SETS:
            entries = [WorkoutItem(workout_id=workout_id, kind=ItemKind.SETS.value, label=label, set_index=index,
                                   value_int=value) for index, value in values]
        else:
            raise ValueError(f"Items of kind '{kind}' are not recorded")

        self.session.add_all(entries)
        self.session.flush()
        return entries

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def prev_latest_by_labels(self, labels: Iterable[str]) -> dict[str, list[int]]:
        """Set values from the most recently completed workout per label.

        Returns ``{label: [value for set 1, set 2, ...]}``.  Labels never
        recorded in a completed workout are left out.
        """
        labels = list(dict.fromkeys(labels))
        out: dict[str, list[int]] = {}
        if not labels:
            return out

        latest = (select(WorkoutItem.label, func.max(Workout.completed_at).label("maxc"))
                  .join(Workout, Workout.id == WorkoutItem.workout_id)
                  .where(Workout.completed_at.is_not(None), WorkoutItem.kind == ItemKind.SETS.value,
                         WorkoutItem.label.in_(labels), )
                  .group_by(WorkoutItem.label)
                  .cte("latest"))
        statement = (select(WorkoutItem.label, WorkoutItem.set_index, WorkoutItem.value_int)
                     .join(Workout, Workout.id == WorkoutItem.workout_id)
                     .join(latest, (latest.c.label == WorkoutItem.label) & (Workout.completed_at == latest.c.maxc))
                     .where(WorkoutItem.kind == ItemKind.SETS.value)
                     .order_by(WorkoutItem.label, WorkoutItem.set_index))

        for label, _set_index, value in self.session.exec(statement).all():
            out.setdefault(label, []).append(value)
        return out
