"""
Logging setup.

Console output always; a daily rotated file under ``LOG_DIR`` when it is set.
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logs_dir: str = "") -> None:
    """Configure the root logger once.

    Args:
        level: Root log level name, e.g. ``"INFO"``.
        logs_dir: Directory for ``traininglog.log``; empty disables file logging.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if root.handlers:
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(console_handler)

    if logs_dir:
        os.makedirs(logs_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(logs_dir, "traininglog.log"), when="midnight", interval=1, backupCount=14,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging configured at %s", level)
