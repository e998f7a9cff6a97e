"""
Application settings.

Values come from environment variables prefixed ``FORECAST_WINDOW_`` (or a
local ``.env`` file), e.g.::

    FORECAST_WINDOW_OUTPUT_PATH=/srv/weather/tokyo.json
    FORECAST_WINDOW_RESET_ON_CORRUPT=true
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_window.datasources.jma.client import (
    DEFAULT_CITY_NAME,
    DEFAULT_REGION_LABEL,
    JMA_IMAGE_ROOT,
    JMA_WEEKLY_TOKYO,
)
from forecast_window.window.models import DEFAULT_WINDOW_DAYS


class Settings(BaseSettings):
    """Runtime configuration for the update flow and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_WINDOW_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "forecast-window"
    app_env: str = "development"
    debug: bool = False

    source_url: str = Field(default=JMA_WEEKLY_TOKYO, description="Weekly forecast page")
    image_root: str = Field(default=JMA_IMAGE_ROOT, description="Prefix for icon paths")
    city_name: str = Field(default=DEFAULT_CITY_NAME, description="Temperature row label")
    region_label: str = Field(default=DEFAULT_REGION_LABEL, description="Icon row label")

    output_path: Path = Path("out/tokyo.json")
    window_days: int = Field(default=DEFAULT_WINDOW_DAYS, ge=1)
    reset_on_corrupt: bool = Field(
        default=False,
        description="Treat an unreadable persisted file as a cold start instead of failing",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, loaded once."""
    return Settings()
