"""Application configuration module.

This module contains settings for the URL shortener application,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "ShortMyURL"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Short links with visit statistics"
    DEBUG: bool = False

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Short links are displayed as {BASE_DOMAIN}/{name}
    BASE_DOMAIN: str = "shortmyurl.us.kg"

    # JSON file holding every short link record
    STORE_PATH: Path = Path("database.json")

    # CORS settings
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # None disables file logging
    LOG_FILENAME: str = "app.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = False
    VISIT_LOG_ENABLED: bool = True
    REQUEST_LOGGING_ENABLED: bool = True

    @field_validator("BASE_DOMAIN")
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_DIR", mode="before")
    def empty_log_dir_is_none(cls, v: Any) -> Optional[str]:
        """Treat an empty LOG_DIR as disabled file logging."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            if not v.strip():
                return []
            if v == "*":
                return ["*"]
            return [item.strip() for item in v.split(",")]
        return v


# Create a singleton instance of the settings
settings = Settings()
