"""Pydantic settings for Protocol Adaptors configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Icons
    base_icons_url: str = Field(
        default="https://icons.llamao.fi/icons",
        description="Base URL for protocol and chain logos",
    )

    # Input sources
    protocols_catalog_path: Path = Field(
        default=Path("data/protocols.json"),
        description="Path to the protocol catalog JSON file",
    )
    adaptors_config_path: Path = Field(
        default=Path("data/adaptors_config.json"),
        description="Path to the per-adapter configuration JSON file",
    )
    adapters_package: str = Field(
        default="adapters",
        description="Importable package holding adapter modules",
    )

    # Which override table to apply (dexs, fees, options, ...)
    adaptor_type: Optional[str] = Field(default=None, description="Default adaptor type")

    # Cache Configuration
    cache_dir: Path = Field(default=Path(".cache/adaptors"), description="Cache directory path")
    cache_ttl_seconds: int = Field(default=300, ge=60, le=86400, description="Cache TTL in seconds")

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level")

    @field_validator("protocols_catalog_path", "adaptors_config_path", "cache_dir", mode="before")
    @classmethod
    def parse_path(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("adaptor_type", mode="before")
    @classmethod
    def parse_adaptor_type(cls, v):
        """Treat blank adaptor type as unset."""
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Normalize log level names."""
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v

    @field_validator("base_icons_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Logo URLs are joined with '/', so drop any trailing slash."""
        return v.rstrip("/")

    def ensure_cache_dir(self) -> Path:
        """Ensure cache directory exists and return it."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
