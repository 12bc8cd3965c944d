"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a local ``.env``)
following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Publishing settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Build service
    api_url: str = Field(
        description="Base URL of the packaging service (the /manifests routes hang off it)",
    )
    build_timeout: float = Field(
        default=120.0,
        description="Build service request timeout in seconds",
        gt=0,
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            msg = "api_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    @property
    def manifests_url(self) -> str:
        """Base URL of the manifest build routes."""
        return f"{self.api_url}/manifests"

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Write stderr logs as JSON lines instead of text",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
