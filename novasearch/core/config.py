from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from .env or environment variables."""

    # Base
    env: str = "development"
    log_level: str = "INFO"

    # Upstream search provider (serper.dev)
    serper_api_key: str = ""
    serper_base_url: str = "https://google.serper.dev"
    serper_timeout_seconds: float = 30.0

    # LLM (OpenAI compatible, OpenRouter by default)
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "anthropic/claude-3.5-sonnet"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000
    llm_timeout_seconds: float = 8.0

    # Cache
    cache_backend: Literal["memory", "redis"] = "memory"
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None
    search_cache_ttl_seconds: float = 300
    source_cache_ttl_seconds: float = 300
    intent_cache_ttl_seconds: float = 600
    location_cache_ttl_seconds: float = 3600
    memory_cache_sweep_seconds: float = 60

    # Paging
    default_page_size: int = 10
    max_page_size: int = 100
    synthetic_page_count: int = 100

    # Location
    state_city_hint_enabled: bool = False  # narrows state-only searches to the state's major city
    geolocation_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance.

    Returns:
        Settings: application settings.
    """
    return Settings()
