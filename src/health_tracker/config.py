"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_ninjas_key: str | None = None
    api_ninjas_url: str = "https://api.api-ninjas.com/v1/nutrition"
    open_food_facts_url: str = "https://world.openfoodfacts.org/cgi/search.pl"
    open_food_facts_page_size: int = 5
    user_agent: str = "HealthTracker/1.0"
    http_timeout_seconds: float = 15.0
    baseline_kcal: float = 2244
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("api_ninjas_key")
    @classmethod
    def _blank_key_is_absent(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
