"""Configuration loading for calcflow.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Every variable is read with the ``CALCFLOW_`` prefix, e.g.
    ``CALCFLOW_FETCH_DELAY=250``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALCFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Clock configuration
    clock_backend: Literal["system", "virtual"] = Field(
        default="system",
        description="Clock used for simulated delays",
    )
    time_unit_seconds: float = Field(
        default=0.001,
        description="Wall-clock seconds per time unit for the system clock",
    )

    # Calculator configuration
    fetch_delay: int = Field(
        default=1000,
        description="Time units fetch_result_async waits before returning",
    )
    update_delay: int = Field(
        default=500,
        description="Time units update_state_flow waits before writing",
    )
    fetch_result: int = Field(
        default=42,
        description="Value returned by fetch_result_async",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("time_unit_seconds")
    @classmethod
    def validate_time_unit(cls, v: float) -> float:
        """Ensure the time unit is positive."""
        if v <= 0:
            raise ValueError("time_unit_seconds must be positive")
        return v

    @field_validator("fetch_delay", "update_delay")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        """Ensure delays are non-negative."""
        if v < 0:
            raise ValueError("delays must be non-negative")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
