"""
Base database configuration.

Import all models here so ``create_all`` can see them.
"""

from traininglog.models.workout import Workout  # noqa: F401
from traininglog.models.workout_item import WorkoutItem  # noqa: F401
