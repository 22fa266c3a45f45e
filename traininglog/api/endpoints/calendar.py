"""
Calendar endpoint.

Full page for normal navigation, only the month grid for htmx requests.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from traininglog.api.dependencies import get_calendar_service, is_fragment_request, local_today
from traininglog.api.templating import templates
from traininglog.services.calendar_service import CalendarService

router = APIRouter()


@router.get("/calendar", response_class=HTMLResponse, summary="Month view of completed sessions.")
def calendar(request: Request, ym: Optional[str] = Query(None, description="Month as YYYY-MM"),
             fragment: bool = Depends(is_fragment_request),
             service: CalendarService = Depends(get_calendar_service), ):
    month = service.month(ym, local_today())
    template = "_calendar.html" if fragment else "calendar.html"
    return templates.TemplateResponse(request, template, {"month": month})
