from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

GIB = 1024 * 1024 * 1024
MIB = 1024 * 1024


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "Docseek"
    log_level: str = "INFO"
    # Transport settings for FastMCP: "http" (default, serves the browser UI), "sse" or "stdio"
    transport: Literal["http", "sse", "stdio"] = "http"
    host: str = "127.0.0.1"
    port: int = 6969


class IndexConfig(BaseModel):
    """Index build configuration values."""

    # Files above this size are dropped by the filesystem source
    max_file_size: int = 64 * MIB
    # Any content at least this long in the first half of the input enables parallel ingestion
    parallel_threshold: int = GIB
    max_workers: Optional[int] = None
    mode: Literal["auto", "sequential", "parallel"] = "auto"
    skip_executables: bool = True


class SearchConfig(BaseModel):
    """Query configuration values."""

    result_limit: int = 20


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSEEK_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    index: IndexConfig = IndexConfig()
    search: SearchConfig = SearchConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
