"""
Database initialization script.

Creates or upgrades the schema without starting the server.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("traininglog.init_db")

if __name__ == "__main__":
    try:
        from traininglog.core.config import settings
        from traininglog.core.logging import setup_logging
        from traininglog.db.init_db import migrate
        from traininglog.db.session import engine

        setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
        migrate(engine)
        logger.info("SUCCESS: Database initialized!")
        sys.exit(0)

    except Exception as e:
        logging.basicConfig(level=logging.ERROR)
        logger.critical("ERROR: Database initialization failed! Details: %s", e)
        sys.exit(1)
