"""Timestamp helpers.

Timestamps are stored in UTC.  Some backends (SQLite) hand them back
without tzinfo, so everything read from the database goes through
:func:`as_utc` before being converted to the local calendar.
"""

import datetime
from typing import Optional


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Return ``value`` as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def local_date(value: Optional[datetime.datetime], tz: datetime.tzinfo) -> Optional[datetime.date]:
    """Calendar date of a stored timestamp in ``tz``."""
    if value is None:
        return None
    return as_utc(value).astimezone(tz).date()


def local_midnight_utc(day: datetime.date, tz: datetime.tzinfo) -> datetime.datetime:
    """UTC instant at which ``day`` starts in ``tz``."""
    return datetime.datetime.combine(day, datetime.time.min, tzinfo=tz).astimezone(datetime.timezone.utc)
