"""
Core configuration module for the documentation engine.

This module defines all application settings using Pydantic BaseSettings,
enabling configuration through environment variables with type validation.
Settings are loaded from .env files and environment variables.
"""

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a working default so the engine can serve a local
    docs directory without any environment configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application Settings
    APP_NAME: str = Field(default="ACTUS Docs Engine", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment (development/staging/production)",
    )

    # Server Settings
    HOST: str = Field(default="0.0.0.0", description="Server host")  # noqa: S104
    PORT: int = Field(default=8000, description="Server port")
    API_V1_PREFIX: str = Field(default="/api/v1", description="API v1 route prefix")

    # CORS Settings
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:3001"],
        description="Allowed CORS origins",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: list[str] = Field(default=["*"], description="Allowed HTTP methods")
    CORS_ALLOW_HEADERS: list[str] = Field(default=["*"], description="Allowed HTTP headers")

    # Document Settings
    DOCS_DIRECTORY: str = Field(
        default="docs", description="Directory holding the markdown documentation"
    )
    DOCS_BASE_PATH: str = Field(
        default="/docs", description="Site path prefix under which documents are served"
    )
    MARKDOWN_EXTENSION: str = Field(default=".md", description="Markdown file extension")
    DEFAULT_CATEGORY: str = Field(
        default="General", description="Category for documents at the docs root"
    )
    DEFAULT_ORDER: int = Field(
        default=999, description="Sort order for documents without an explicit order"
    )

    # Navigation Settings
    SITE_TITLE: str = Field(default="ACTUS", description="Site title used in section headers")
    DOC_SECTIONS: Annotated[list[str], NoDecode] = Field(
        default=["financial", "framework", "insurance"],
        description="Top-level documentation sections",
    )
    DEFAULT_SECTION: str = Field(
        default="framework", description="Section shown when the path names none"
    )

    # Search Settings
    SEARCH_THRESHOLD: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Maximum fuzzy distance for a match"
    )
    SEARCH_RESULT_LIMIT: int = Field(default=10, ge=1, description="Maximum search results")

    # Logging Settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    LOG_FILE: str | None = Field(default=None, description="Log file path (None for stdout only)")

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from JSON array, comma-separated string or list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("DOC_SECTIONS", mode="before")
    @classmethod
    def parse_sections(cls, v: Any) -> list[str]:
        """Parse sections from JSON array or comma-separated string."""
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                return json.loads(s)
            return [item.strip() for item in s.split(",") if item.strip()]
        return v

    @field_validator("DOCS_BASE_PATH")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        """Ensure the base path has a single leading slash and no trailing one."""
        return "/" + v.strip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    This function uses lru_cache to ensure settings are loaded only once,
    improving performance and ensuring consistency across the application.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
