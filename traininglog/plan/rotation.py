"""
The 12-day training rotation.

Odd days alternate two strength templates with a rotating single-set
finisher; even days (and anything outside the table) are easy days.

======  ==========  ==================  =====  ============
Day     Template    Finisher            Plank  Knee raises
======  ==========  ==================  =====  ============
1       Strength A  green face pulls    yes    no
3       Strength B  band curls          --     yes
5       Strength A  purple dips         yes    no
7       Strength B  green face pulls    --     no
9       Strength A  band curls          no     yes
11      Strength B  purple dips         --     no
======  ==========  ==================  =====  ============
"""

from __future__ import annotations

from typing import Callable

from traininglog.plan.items import PlanItem, check, heading, sets

ROTATION_LENGTH = 12

FOAM_ROLL = "foam roll"
WALK = "walk 55 mins 1%, 5 mins 0%"
STRETCH = "stretch"
BREATHE = "breathe"


def easy_day() -> list[PlanItem]:
    return [check(FOAM_ROLL), check(WALK), check(STRETCH), check(BREATHE)]


def _opening() -> list[PlanItem]:
    return [check(FOAM_ROLL), check(WALK), heading("3-4 circuits")]


def _closing(finisher: str) -> list[PlanItem]:
    return [
        sets(finisher, 1, 12, 20, note="finisher"),
        check(STRETCH),
        check(BREATHE),
    ]


def _knee_raises() -> PlanItem:
    return sets("knee raises", 4, 6, 12)


def strength_a(finisher: str, include_plank: bool = False, include_knee_raises: bool = False) -> list[PlanItem]:
    """Pushups, rows and squats, optional core work, then the finisher."""
    items = _opening()
    items += [
        sets("inc 2 pushups", 4, 8, 15),
        sets("green rows", 4, 8, 12),
        sets("bw squats", 4, 10, 15),
    ]
    if include_plank:
        items.append(sets("plank", 4, 20, 60, note="secs"))
    if include_knee_raises:
        items.append(_knee_raises())
    return items + _closing(finisher)


def strength_b(finisher: str, include_knee_raises: bool = False) -> list[PlanItem]:
    """Pushups, band pullups and split squats, optional knee raises, then the finisher."""
    items = _opening()
    items += [
        sets("inc 2 pushups", 4, 8, 15),
        sets("purp/red band pullups", 4, 6, 10),
        sets("bw split squats", 4, 10, 15),
    ]
    if include_knee_raises:
        items.append(_knee_raises())
    return items + _closing(finisher)


_ROTATION: dict[int, Callable[[], list[PlanItem]]] = {
    1: lambda: strength_a("green face pulls", include_plank=True),
    2: easy_day,
    3: lambda: strength_b("band curls", include_knee_raises=True),
    4: easy_day,
    5: lambda: strength_a("purple dips", include_plank=True),
    6: easy_day,
    7: lambda: strength_b("green face pulls"),
    8: easy_day,
    9: lambda: strength_a("band curls", include_knee_raises=True),
    10: easy_day,
    11: lambda: strength_b("purple dips"),
    12: easy_day,
}


def day(n: int) -> list[PlanItem]:
    """Plan items for day ``n`` of the rotation.  Unknown days are easy days."""
    return _ROTATION.get(n, easy_day)()


def next_in_rotation(last_completed: int | None) -> int:
    """Day that follows ``last_completed``; day 1 when nothing was completed yet."""
    if last_completed is None:
        return 1
    return (last_completed % ROTATION_LENGTH) + 1
