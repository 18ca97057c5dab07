from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings read from CODEFORGE_* environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix="CODEFORGE_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    max_consecutive_rejections: int | None = Field(None, ge=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level
