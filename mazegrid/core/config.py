from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mazegrid.core.constants import DEFAULT_GRID_DATA_PATH, SERVICE_NAME

DEFAULT_CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMATS = {"json", "console"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    service_name: str = Field(default=SERVICE_NAME, alias="SERVICE_NAME")
    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")
    grid_data_path: Path = Field(default=DEFAULT_GRID_DATA_PATH, alias="GRID_DATA_PATH")
    grid_cache_enabled: bool = Field(default=True, alias="GRID_CACHE_ENABLED")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    cors_allowed_origins: str | list[str] = Field(
        default_factory=lambda: DEFAULT_CORS_ALLOWED_ORIGINS.copy(),
        alias="CORS_ALLOWED_ORIGINS",
    )

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def parse_cors_allowed_origins(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            raw_origins = value.split(",")
        elif isinstance(value, list):
            raw_origins = [str(origin) for origin in value]
        else:
            return DEFAULT_CORS_ALLOWED_ORIGINS.copy()

        # Origin headers never carry a trailing slash.
        cleaned = (origin.strip().rstrip("/") for origin in raw_origins)
        origins = list(dict.fromkeys(origin for origin in cleaned if origin))
        if "*" in origins:
            return ["*"]
        return origins or DEFAULT_CORS_ALLOWED_ORIGINS.copy()

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        stripped = value.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(sorted(LOG_LEVELS))}")
        return normalized

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in LOG_FORMATS:
            raise ValueError("LOG_FORMAT must be one of: console, json")
        return normalized


@lru_cache
def get_settings() -> Settings:
    return Settings()
