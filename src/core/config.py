"""
Configuration management using Pydantic Settings

Settings affect only diagnostics written to stderr; the computation and
the stdout transcript never depend on them.
"""
import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("text", "json")


class Settings(BaseSettings):
    """Application settings (environment variables with DISCRIMINANT_ prefix)"""

    model_config = SettingsConfigDict(
        env_prefix="DISCRIMINANT_",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "discriminant-calculator"
    log_level: str = Field(default="WARNING", description="Logging level for stderr diagnostics")
    log_format: str = Field(
        default="text",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check against the levels known to logging"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {v!r}")
        return fmt


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
