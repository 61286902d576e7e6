"""
Application Configuration
Central place for all configuration values
"""
import logging
import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator
from sqlalchemy.engine import URL

BASE_DIR = Path(__file__).resolve().parent

DEBUG_MODE = "debug"
RELEASE_MODE = "release"
TEST_MODE = "test"
MODES = (DEBUG_MODE, RELEASE_MODE, TEST_MODE)

MODE_LOG_LEVELS = {
    DEBUG_MODE: "DEBUG",
    RELEASE_MODE: "INFO",
    TEST_MODE: "WARNING",
}

DEFAULT_PORT = 5050
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    # Database connection
    db_server: str = "localhost"
    db_port: int = 1433
    db_user: str = ""
    db_password: str = ""
    db_name: str = ""
    db_driver: str = "mssql+pymssql"
    database_url: Optional[str] = None

    # HTTP server
    port: int = DEFAULT_PORT
    mode: Literal["debug", "release", "test"] = RELEASE_MODE

    # Logging Settings
    log_level: Optional[str] = None
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def debug(self) -> bool:
        return self.mode == DEBUG_MODE

    @property
    def effective_log_level(self) -> str:
        return (self.log_level or MODE_LOG_LEVELS[self.mode]).upper()

    def sqlalchemy_url(self):
        """DATABASE_URL wins; otherwise the URL is assembled from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_server,
            port=self.db_port,
            database=self.db_name or None,
        )


def resolve_mode(raw_mode: Optional[str]) -> str:
    # Unknown or missing modes run as release
    mode = (raw_mode or "").strip().lower()
    return mode if mode in MODES else RELEASE_MODE


def load_settings(env_file: Optional[Path] = BASE_DIR / ".env") -> Settings:
    # Ensure .env variables are available before reading any settings so that
    # deploying without exporting env vars still works.
    if env_file is not None:
        load_dotenv(env_file)

    values = {
        "db_server": os.getenv("DB_SERVER"),
        "db_port": os.getenv("DB_PORT"),
        "db_user": os.getenv("DB_USER"),
        "db_password": os.getenv("DB_PASSWORD"),
        "db_name": os.getenv("DB_NAME"),
        "db_driver": os.getenv("DB_DRIVER"),
        "database_url": os.getenv("DATABASE_URL"),
        "port": os.getenv("PORT"),
        "log_level": os.getenv("LOG_LEVEL"),
        "log_format": os.getenv("LOG_FORMAT"),
    }
    provided = {key: value for key, value in values.items() if value}
    return Settings(mode=resolve_mode(os.getenv("APP_MODE")), **provided)
