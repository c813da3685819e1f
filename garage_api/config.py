"""Garage API — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./garage.db"

    # Timezone
    TIMEZONE: str = "UTC"

    # Employee provisioning
    LOGIN_ID_UNIQUENESS: str = "precheck"  # "precheck" or "constraint"
    PROVISIONING_POLICY: str = "allow_all"  # "allow_all" or "same_garage"
    SANITIZE_NAMES: bool = False
    EXPOSE_ERROR_DETAILS: bool = True

    # Orphan sweep
    ORPHAN_SWEEP_ENABLED: bool = False
    ORPHAN_SWEEP_INTERVAL_MINUTES: int = 60
    ORPHAN_SWEEP_DELETE: bool = False

    # Seed a demo garage owner on startup
    SEED_OWNER: bool = False

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
