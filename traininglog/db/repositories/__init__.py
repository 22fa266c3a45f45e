"""Database repositories."""

from traininglog.db.repositories.workout import WorkoutRepository
from traininglog.db.repositories.workout_item import WorkoutItemRepository

__all__ = [
    "WorkoutRepository",
    "WorkoutItemRepository",
]
