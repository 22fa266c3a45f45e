"""
Home and health endpoints.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from traininglog.api.dependencies import get_workout_service
from traininglog.api.templating import templates
from traininglog.core.config import settings
from traininglog.services.workout_service import WorkoutService

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Home page with database status and next plan day.")
def home(request: Request, service: WorkoutService = Depends(get_workout_service)):
    return templates.TemplateResponse(request, "index.html", {
        "db_status": request.app.state.db_status,
        "next_day": service.next_day(),
    })


@router.get("/health", summary="Health check endpoint for monitoring.")
def health_check(request: Request):
    return {
        "status": "healthy",
        "service": "traininglog",
        "version": settings.VERSION,
        "db": request.app.state.db_status,
    }
