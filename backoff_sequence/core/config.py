# backoff_sequence/core/config.py
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

U64_MAX = 2**64 - 1

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """
    Package settings, loaded from environment variables and/or .env file.
    """

    # Environment settings
    APP_ENV: str = "development"
    LOG_LEVEL: str = "WARNING"

    # Arithmetic limits for the built-in growth calculators
    BACKOFF_VALUE_LIMIT: int = Field(default=U64_MAX, gt=0)
    BACKOFF_MAX_MIN_SKIP: Optional[int] = Field(default=None, gt=0)

    # Default bounds used by Backoff.from_settings
    BACKOFF_MAX_ITERATIONS: Optional[int] = Field(default=None, ge=0)
    BACKOFF_MIN_VALUE: Optional[float] = Field(default=None, ge=0)
    BACKOFF_MAX_VALUE: Optional[float] = Field(default=None, ge=0)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        """Accept log levels in any case."""
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _check_bounds(self) -> "Settings":
        # min > max is a legal (if odd) configuration; only the value limit is checked
        for name in ("BACKOFF_MIN_VALUE", "BACKOFF_MAX_VALUE"):
            bound = getattr(self, name)
            if bound is not None and bound > self.BACKOFF_VALUE_LIMIT:
                raise ValueError(f"{name} exceeds BACKOFF_VALUE_LIMIT")
        return self

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() in ("development", "dev", "local", "test")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
