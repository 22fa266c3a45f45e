"""
FastAPI application.

Runs the schema migration and records database reachability once at
startup, then serves the HTML pages, the CSV export and static files.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from traininglog.api.router import router
from traininglog.core.config import settings
from traininglog.core.logging import setup_logging
from traininglog.db.init_db import migrate
from traininglog.db.session import engine, ping

setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    migrate(engine)
    app.state.db_status = "ok" if ping(engine) else "down"
    logger.info("Database status: %s", app.state.db_status)
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Personal workout tracker with a rotating 12-day plan.",
    lifespan=lifespan)

app.state.db_status = "down"

app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
app.include_router(router)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("db error", status_code=500)
