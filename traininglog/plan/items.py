"""
Plan item data model.

A plan day is an ordered list of :class:`PlanItem` entries: checklist
boxes, section headings, or rep-range "sets" inputs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ItemKind(str, Enum):
    """What a plan item renders as and how it is recorded."""
    CHECK = "check"
    SETS = "sets"
    HEADING = "heading"



class PlanItem(BaseModel):
    """One entry of a plan day."""

    model_config = {"frozen": True}

    kind: ItemKind
    label: str = Field(..., description="Human-readable label, also the storage key for recorded values")
    sets: int = Field(default=0, ge=0, description="Number of set inputs; ignored unless kind is 'sets'")
    reps_min: int = Field(default=0, ge=0, description="Target range, display only")
    reps_max: int = Field(default=0, ge=0, description="Target range, display only")
    note: str = Field(default="", description="Optional suffix, e.g. 'secs' or 'finisher'")

    @property
    def rep_range(self) -> str:
        if not self.reps_max:
            return ""
        return f"{self.reps_min}-{self.reps_max}"


def check(label: str) -> PlanItem:
    return PlanItem(kind=ItemKind.CHECK, label=label)


def heading(label: str) -> PlanItem:
    return PlanItem(kind=ItemKind.HEADING, label=label)


def sets(label: str, count: int, reps_min: int, reps_max: int, note: str = "") -> PlanItem:
    return PlanItem(kind=ItemKind.SETS, label=label, sets=count, reps_min=reps_min, reps_max=reps_max, note=note)
