"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    mongodb_uri: str
    mongodb_database: str = "ReserviaDB"
    jwt_secret: str
    token_ttl_seconds: int = 3600
    default_page_size: int = 10
    max_page_size: int = 100
    max_search_length: int = 100
    log_level: str = "INFO"
    cors_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return []
    return [origin.strip() for origin in cleaned.split(",") if origin.strip()]
