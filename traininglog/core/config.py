"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
``DATABASE_URL`` has no default: importing this module without it fails.
"""

import datetime
import logging
from functools import cached_property
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Log"
    VERSION: str = "0.1.0"

    DEBUG: bool = False

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 4

    # Local calendar used for session dates, the calendar view and the export
    TIMEZONE: str = "America/Vancouver"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    KEEP_ALIVE_TIMEOUT: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""

    SESSION_LIST_LIMIT: int = 100

    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @cached_property
    def tz(self) -> datetime.tzinfo:
        """The configured local timezone, or the host's zone if it is unknown."""
        try:
            return ZoneInfo(self.TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, using the host's local zone", self.TIMEZONE)
            return datetime.datetime.now().astimezone().tzinfo


# Global settings instance
settings = Settings()
