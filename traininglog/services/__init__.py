"""Business logic services."""

from traininglog.services.calendar_service import CalendarService
from traininglog.services.export_service import ExportService
from traininglog.services.workout_service import WorkoutService

__all__ = [
    "CalendarService",
    "ExportService",
    "WorkoutService",
]
