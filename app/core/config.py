"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Only the psycopg2 driver is installed, so the URL must name it explicitly.
VALID_DATABASE_URL_PREFIXES = ("postgresql+psycopg2://",)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"

    # Postgres connection; no default so a missing store fails at startup
    DATABASE_URL: str

    # JWT authentication. No fallback secret: startup fails if unset.
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = "HS256"
    # Registration and login issue tokens with different lifetimes (1 hour vs 7 days).
    REGISTER_TOKEN_EXPIRE_MINUTES: int = 60
    LOGIN_TOKEN_EXPIRE_MINUTES: int = 10080

    # TMDB (remote movie catalog)
    TMDB_API_KEY: SecretStr
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/w500"
    TMDB_LANGUAGE: str = "ru"
    TMDB_REQUEST_TIMEOUT_SEC: float = 10.0

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL using the psycopg2 driver (postgresql+psycopg2://...)"
            )
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("JWT_SECRET", "TMDB_API_KEY")
    @classmethod
    def validate_required_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("secret must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("REGISTER_TOKEN_EXPIRE_MINUTES", "LOGIN_TOKEN_EXPIRE_MINUTES")
    @classmethod
    def validate_token_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 43200:
            raise ValueError(
                "token lifetime must be between 1 and 43200 minutes (1 min to 30 days)"
            )
        return v

    @field_validator("TMDB_BASE_URL", "TMDB_IMAGE_BASE_URL")
    @classmethod
    def validate_tmdb_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("TMDB URLs must be set and non-empty")
        s = v.strip().lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError(
                "TMDB URLs must use http or https (e.g. https://api.themoviedb.org/3)"
            )
        return v.strip().rstrip("/")

    @field_validator("TMDB_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_tmdb_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError(
                "TMDB_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
