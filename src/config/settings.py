"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is required; every field has a default suitable for running
    the ranking engine in-process.

    Optional environment variables:
        - ENVIRONMENT: Environment name (development, staging, production)
        - LOG_LEVEL: Minimum log level (default: INFO)
        - JSON_LOGS: Emit JSON logs instead of console output
        - RANKING_TOP_N: Shortlist size (default: 10)
        - RANKING_MAX_WORKERS: Threads used to score candidates (default: 1)
        - PRICE_FLOOR_EUR / PRICE_CEILING_EUR: Catalog price bounds
        - CATALOG_PATH: JSON catalog export used by load_catalog()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit JSON formatted logs")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # ==========================================================================
    # Ranking
    # ==========================================================================
    ranking_top_n: int = Field(default=10, ge=1, description="Shortlist size")
    ranking_max_workers: int = Field(
        default=1,
        ge=1,
        description="Threads used for the per-candidate scoring step (1 = sequential)",
    )

    # ==========================================================================
    # Catalog
    # ==========================================================================
    price_floor_eur: float = Field(default=50.0, ge=0, description="Catalog minimum price (EUR)")
    price_ceiling_eur: float = Field(default=250.0, ge=0, description="Catalog maximum price (EUR)")
    catalog_path: Optional[Path] = Field(
        default=None,
        description="Path to a JSON catalog export"
    )

    @field_validator("catalog_path", mode="before")
    @classmethod
    def parse_catalog_path(cls, v):
        if isinstance(v, str):
            return Path(v) if v.strip() else None
        return v

    @model_validator(mode="after")
    def check_price_bounds(self) -> "Settings":
        if self.price_floor_eur > self.price_ceiling_eur:
            raise ValueError("price_floor_eur must not exceed price_ceiling_eur")
        return self

    @property
    def price_bounds(self) -> Tuple[float, float]:
        return (self.price_floor_eur, self.price_ceiling_eur)


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.

    Returns:
        Settings: The application settings instance
    """
    env_file = Path(__file__).parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.

    Args:
        **overrides: Setting values to override

    Returns:
        Settings: A new settings instance with overrides applied
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)
