"""Configuration settings for Keranjang."""
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get project root directory (3 levels up from this file's package)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

VALID_BACKENDS = ("memory", "json", "sql")
VALID_LOCALES = ("id", "en")


class KeranjangSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Persistence
    STORE_BACKEND: str = "memory"  # memory, json, sql
    JSON_STORE_DIR: Path = Path("data")
    DB_URL: str = "sqlite:///keranjang.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None
    LOG_FORMAT: str = "simple"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Parser
    DEFAULT_LOCALE: str = "id"

    # Engine
    DEFAULT_PAGE_SIZE: int = 20
    OTHER_CATEGORY: str = "Lainnya"

    model_config = SettingsConfigDict(
        env_prefix="KERANJANG_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log file parent directory exists
        if self.LOG_FILE:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @field_validator("STORE_BACKEND")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_BACKENDS:
            raise ValueError(f"Store backend must be one of: {', '.join(VALID_BACKENDS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOCALES:
            raise ValueError(f"Locale must be one of: {', '.join(VALID_LOCALES)}")
        return v

    @field_validator("DEFAULT_PAGE_SIZE")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Page size must be positive")
        return v


@lru_cache()
def get_settings() -> KeranjangSettings:
    """Get cached settings instance."""
    return KeranjangSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache to force reload from environment."""
    get_settings.cache_clear()
