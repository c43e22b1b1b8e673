"""
Configuration for the convex_hull command line.

Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HullSettings(BaseSettings):
    """Settings for reading points and pacing a traced scan."""

    model_config = SettingsConfigDict(
        env_prefix="CONVEX_HULL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    step_delay_ms: int = Field(
        default=500,
        description="Pause between scan steps when tracing",
        ge=0,
        le=10000,
    )
    exact_coordinates: bool = Field(
        default=False,
        description="Parse decimal coordinates as exact fractions",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the command line",
    )


@lru_cache
def get_settings() -> HullSettings:
    """Get cached settings instance."""
    return HullSettings()
