"""
Development server launcher.

Loads .env file and runs the app with uvicorn.  Exits with status 1 when
the configuration is incomplete (e.g. ``DATABASE_URL`` is not set).

Usage:
    python scripts/run_dev.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn
from pydantic import ValidationError

logger = logging.getLogger("traininglog.run_dev")

if __name__ == "__main__":
    try:
        from traininglog.core.config import settings
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.critical("Invalid configuration, is DATABASE_URL set?\n%s", e)
        sys.exit(1)

    from traininglog.core.logging import setup_logging

    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info("Listening on http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run("traininglog.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG,
                timeout_keep_alive=settings.KEEP_ALIVE_TIMEOUT, log_level=settings.LOG_LEVEL.lower())
