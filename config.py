# config.py
"""Configuration settings for the Lesson Forge lesson plan generator.
Uses Pydantic BaseSettings for automatic environment variable loading.
"""

from __future__ import annotations

import structlog
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = structlog.get_logger()

_PLACEHOLDER_API_KEYS = {"nope", "changeme", "your-api-key", "<api-key>"}


class LessonForgeSettings(BaseSettings):
    """Full configuration for Lesson Forge."""

    # API and Model Configuration
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-2.5-flash-preview-05-20"
    # Supplied by the host environment; never committed.
    GEMINI_API_KEY: str = ""

    # LLM Call Settings
    LLM_RETRY_ATTEMPTS: int = Field(3, ge=1)
    LLM_RETRY_DELAY_MS: int = Field(1000, ge=0)
    # None disables the client-side timeout
    HTTPX_TIMEOUT: float | None = None

    # Lesson Defaults
    DEFAULT_GRADE_LEVEL: str = "5th Grade"

    # Logging & UI
    LOG_LEVEL_STR: str = Field("INFO", alias="LESSON_LOG_LEVEL")
    LOG_FORMAT: str = (
        "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
    )
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_FILE: str | None = None
    # Base directory for a relative LOG_FILE
    LOG_DIR: str = "logs"
    ENABLE_RICH_OUTPUT: bool = True

    @field_validator("GEMINI_API_KEY")
    @classmethod
    def reject_placeholder_key(cls, value: str) -> str:
        if value.strip().lower() in _PLACEHOLDER_API_KEYS:
            raise ValueError(
                "GEMINI_API_KEY is set to a placeholder value. Provide a real key."
            )
        if not value:
            logger.warning(
                "GEMINI_API_KEY is not set. Generation calls will fail until it is provided."
            )
        return value

    @field_validator("GEMINI_API_BASE")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    model_config = SettingsConfigDict(
        env_prefix="", env_file=".env", extra="ignore", populate_by_name=True
    )


settings = LessonForgeSettings()
