"""
Application router.

Aggregates all page and export endpoints.
"""

from fastapi import APIRouter

from traininglog.api.endpoints import calendar, export, home, sessions

router = APIRouter()

# Include endpoint routers
router.include_router(home.router, tags=["Home"])
router.include_router(calendar.router, tags=["Calendar"])
router.include_router(sessions.router, tags=["Sessions"])
router.include_router(export.router, tags=["Export"])
