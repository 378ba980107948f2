"""API configuration read from environment variables.

Values are read once and cached; call ``get_settings.cache_clear()`` after
changing the environment (tests do this through a fixture).

Environment variables:
    ENVIRONMENT: Deployment label (default: dev)
    API_PREFIX: Mount prefix for all routers (default: /api)
    CORS_ALLOW_ORIGINS: Comma-separated allowed origins
    LOG_LEVEL: Root log level (default: INFO)
    CATALOG_DATA_DIR: Directory with the catalog JSON files
        (default: bundled travel_shared/data)
"""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


class ApiSettings(BaseModel):
    """Runtime configuration for the API."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(default="dev", description="Deployment label")
    api_prefix: str = Field(default="/api", description="Router mount prefix")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","),
        description="Allowed CORS origins",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    catalog_data_dir: str | None = Field(
        default=None,
        description="Directory with catalog JSON files (None = bundled data)",
    )

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure a leading slash and no trailing slash ("" disables the prefix)."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name."""
        return v.strip().upper()

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Build settings from the process environment."""
        origins = os.environ.get("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            api_prefix=os.environ.get("API_PREFIX", "/api"),
            cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            catalog_data_dir=os.environ.get("CATALOG_DATA_DIR") or None,
        )


@lru_cache
def get_settings() -> ApiSettings:
    """Get cached settings built from the environment."""
    return ApiSettings.from_env()
