"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Color settings are hex strings; the scale endpoints are validated at startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

import math
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ulogger.core.colors import hex_to_channels


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://ulogger:ulogger@db:5432/ulogger"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers give postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Display
    display_timezone: str = ""  # IANA name; empty = host timezone
    speed_color_start: str = "#ffc700"
    speed_color_stop: str = "#5300ff"
    speed_scale_max: float = 40.0  # m/s mapped to the stop color

    @field_validator("speed_color_start", "speed_color_stop")
    @classmethod
    def validate_scale_color(cls, v: str) -> str:
        if any(math.isnan(c) for c in hex_to_channels(v)):
            raise ValueError(f"Invalid hex color: {v}")
        return v

    # Map assets
    preload_map_assets: bool = False
    loader_timeout_ms: int = 10_000
    asset_fetch_timeout_seconds: float = 30.0
    openlayers_js_url: str = "https://cdn.jsdelivr.net/npm/ol@v9.2.4/dist/ol.js"
    openlayers_css_url: str = "https://cdn.jsdelivr.net/npm/ol@v9.2.4/ol.css"

    # API
    cors_origins: list[str] = ["http://localhost:8080"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
