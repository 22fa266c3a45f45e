"""
Session endpoints.

New-session form, draft save, completion, history list and detail.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from traininglog.api.dependencies import (get_workout_service, is_fragment_request, local_today, path_workout_id,
                                          session_form, )
from traininglog.api.templating import templates
from traininglog.core.config import settings
from traininglog.schemas.session_form import SessionForm
from traininglog.services.workout_service import WorkoutService

router = APIRouter()

_WORKOUT_ID_INPUT = '<input type="hidden" id="workout_id" name="workout_id" value="{}" hx-swap-oob="outerHTML">'


@router.get("/session/new", response_class=HTMLResponse, summary="Form for the next session in the rotation.")
def new_session(request: Request, service: WorkoutService = Depends(get_workout_service)):
    view = service.new_session(local_today())
    return templates.TemplateResponse(request, "session_new.html", {"view": view})


@router.post("/session/save", response_class=HTMLResponse, summary="Save the session as a draft.")
def save_session(form: SessionForm = Depends(session_form), service: WorkoutService = Depends(get_workout_service)):
    result = service.save_draft(form)
    body = "Saved"
    if result.created:
        # Later posts from the same page must carry the new id
        body = _WORKOUT_ID_INPUT.format(result.workout_id) + body
    return HTMLResponse(body, headers={"HX-Trigger": "saved"})


@router.post("/session/complete", summary="Save and mark the session completed.")
def complete_session(form: SessionForm = Depends(session_form), fragment: bool = Depends(is_fragment_request),
                     service: WorkoutService = Depends(get_workout_service)):
    service.complete(form)
    if fragment:
        return Response("Completed", media_type="text/html", headers={"HX-Redirect": "/"})
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/sessions", response_class=HTMLResponse, summary="Most recent sessions.")
def list_sessions(request: Request, service: WorkoutService = Depends(get_workout_service)):
    rows = service.list_sessions(settings.SESSION_LIST_LIMIT)
    return templates.TemplateResponse(request, "sessions.html", {"rows": rows})


@router.get("/sessions/{workout_id}", response_class=HTMLResponse, summary="One recorded session.")
def show_session(request: Request, detail_id: int = Depends(path_workout_id),
                 service: WorkoutService = Depends(get_workout_service)):
    detail = service.get_detail(detail_id)
    return templates.TemplateResponse(request, "session_show.html", {"w": detail})
