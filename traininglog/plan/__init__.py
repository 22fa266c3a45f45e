"""The fixed 12-day training plan."""

from traininglog.plan.items import ItemKind, PlanItem
from traininglog.plan.rotation import ROTATION_LENGTH, day, next_in_rotation

__all__ = [
    "ItemKind",
    "PlanItem",
    "ROTATION_LENGTH",
    "day",
    "next_in_rotation",
]
