"""
Session form schema.

Parses the flat form posted by the new-session page into a validated
:class:`SessionForm`.  Per-item fields are keyed by the item's index on
the page::

    it_<idx>_kind   'check' or 'sets' (anything else is ignored)
    it_<idx>_label  item label
    it_<idx>_sets   number of set inputs rendered (sets only)
    c_<idx>         present when the checkbox is ticked (check only)
    s_<idx>_<n>     value of set n, blank when not done (sets only)
"""

from __future__ import annotations

import datetime
import re
from decimal import Decimal
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from traininglog.plan import ItemKind

_KIND_KEY = re.compile(r"it_(.+)_kind")


class SetValue(BaseModel):
    """One completed set."""

    set_index: int = Field(..., ge=1)
    value: int


class ItemEntry(BaseModel):
    """All submitted values for one labelled plan item."""

    kind: ItemKind
    label: str = Field(..., min_length=1)
    checked: bool = False
    values: list[SetValue] = Field(default_factory=list)


class SessionForm(BaseModel):
    """A save or complete submission."""

    workout_id: Optional[int] = Field(None, gt=0, description="Existing draft; None creates a new workout")
    day: Optional[int] = Field(None, ge=1, le=12, description="Plan day, required to create a workout")
    session_date: Optional[datetime.date] = None
    body_weight_kg: Optional[Decimal] = Field(None, ge=0, max_digits=6, decimal_places=2)
    items: list[ItemEntry] = Field(default_factory=list)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> SessionForm:
        """Build from posted form fields.

        Raises:
            ValueError: on non-numeric ids, counts or set values, and on
                anything the model rejects (pydantic's ``ValidationError``
                is a ``ValueError``).
        """
        workout_id = _optional_int(form.get("workout_id"))
        items = []
        for key in form.keys():
            match = _KIND_KEY.fullmatch(key)
            if not match:
                continue
            entry = _parse_item(form, match.group(1))
            if entry is not None:
                items.append(entry)

        return cls(workout_id=workout_id or None, day=_optional_int(form.get("day")),
                   session_date=_blank_to_none(form.get("session_date")),
                   body_weight_kg=_blank_to_none(form.get("body_weight_kg")), items=items, )


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _optional_int(value: Any) -> Optional[int]:
    value = _blank_to_none(value)
    if value is None:
        return None
    return int(value)


def _parse_item(form: Mapping[str, Any], idx: str) -> Optional[ItemEntry]:
    try:
        kind = ItemKind(form.get(f"it_{idx}_kind"))
    except ValueError:
        return None
    label = form.get(f"it_{idx}_label") or ""

    if kind == ItemKind.CHECK:
        return ItemEntry(kind=kind, label=label, checked=bool(form.get(f"c_{idx}")))
    if kind == ItemKind.SETS:
        count = _optional_int(form.get(f"it_{idx}_sets")) or 0
        values = []
        for set_index in range(1, count + 1):
            value = _optional_int(form.get(f"s_{idx}_{set_index}"))
            if value is not None:
                values.append(SetValue(set_index=set_index, value=value))
        return ItemEntry(kind=kind, label=label, values=values)
    return None
