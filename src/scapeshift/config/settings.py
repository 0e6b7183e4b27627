"""
Configuration management for scapeshift.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class GathererSettings(BaseSettings):
    """Main configuration for the Gatherer access layer.

    Settings can be overridden via:
    1. Environment variables (prefixed with GATHERER_)
    2. .env file in project root
    3. Programmatic overrides

    Example:
        export GATHERER_CACHE_BACKEND=disk
        export GATHERER_LOG_LEVEL=DEBUG
    """

    # === HTTP ===
    host: str = Field(
        default="gatherer.wizards.com", description="Gatherer hostname"
    )
    scheme: Literal["http", "https"] = Field(
        default="http", description="URL scheme used for relative request URIs"
    )
    user_agent: str = Field(
        default="scapeshift/1.2", description="User-Agent header value"
    )
    connect_timeout: float = Field(
        default=10.0, gt=0, le=120, description="Connect timeout in seconds"
    )
    read_timeout: float = Field(
        default=30.0, gt=0, le=300, description="Read timeout in seconds"
    )
    max_redirects: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum redirect hops followed for a single request",
    )

    # === Cache ===
    cache_backend: Literal["memory", "null", "disk"] = Field(
        default="memory", description="Cache store used for Gatherer responses"
    )
    cache_dir: Path = Field(
        default=Path(".cache/gatherer"),
        description="Directory for the disk cache store",
    )
    cache_expire: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before a disk cache entry expires (None keeps forever)",
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")

    @field_validator("host", mode="before")
    @classmethod
    def strip_host(cls, v):
        """Accept hosts given with a scheme or trailing slash."""
        if isinstance(v, str):
            v = v.strip().split("://", 1)[-1].rstrip("/")
        return v

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"

    model_config = {
        "env_prefix": "GATHERER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = GathererSettings()


def reload_settings() -> GathererSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = GathererSettings()
    return settings
