"""
Outline MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional, Literal


class OutlineSettings(BaseSettings):
    """Outline API configuration."""
    api_key: str = Field(..., alias="OUTLINE_API_KEY")
    instance_url: str = Field(..., alias="OUTLINE_INSTANCE_URL")
    timeout_seconds: Optional[float] = Field(None, alias="OUTLINE_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore"}

    @field_validator("api_key", "instance_url")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("instance_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    format: Literal["json", "text"] = Field("text", alias="LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    outline: OutlineSettings = Field(default_factory=OutlineSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
