"""
Shared API dependencies.

Database-bound services, form parsing and partial-page request detection.
"""

import datetime
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from sqlmodel import Session

from traininglog.core.config import settings
from traininglog.db.session import get_db
from traininglog.schemas.session_form import SessionForm
from traininglog.services.calendar_service import CalendarService
from traininglog.services.export_service import ExportService
from traininglog.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)


def get_workout_service(db: Session = Depends(get_db)) -> WorkoutService:
    return WorkoutService(db, settings.tz)


def get_calendar_service(db: Session = Depends(get_db)) -> CalendarService:
    return CalendarService(db, settings.tz)


def get_export_service(db: Session = Depends(get_db)) -> ExportService:
    return ExportService(db, settings.tz)


def local_today() -> datetime.date:
    return datetime.datetime.now(settings.tz).date()


def is_fragment_request(hx_request: Optional[str] = Header(None)) -> bool:
    """True when the client only wants the page fragment (htmx sends ``HX-Request: true``)."""
    return hx_request == "true"


async def session_form(request: Request) -> SessionForm:
    """Parse the posted session form or reject the request with 400."""
    try:
        form = await request.form()
        return SessionForm.from_form(form)
    except ValueError as e:
        logger.info("Rejected session form: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="bad form")


def path_workout_id(workout_id: str) -> int:
    """The ``{workout_id}`` path segment; anything but a positive integer is 404."""
    try:
        value = int(workout_id)
    except ValueError:
        value = 0
    if value <= 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return value
