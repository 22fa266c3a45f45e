"""SQLModel database models."""

from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem

__all__ = [
    "Workout",
    "WorkoutItem",
]
