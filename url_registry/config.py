"""Configuration management for the URL registry."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Registry settings
    base_url: str = Field(
        default="https://short.ly",
        description="Base URL prefixed to short codes when composing short links"
    )

    storage_file: str = Field(
        default="urls.json",
        description="Path of the JSON file holding the registry"
    )

    max_generation_attempts: int = Field(
        default=100,
        ge=1,
        description="Maximum random draws when generating an unused short code"
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stderr only if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config(**overrides) -> Config:
    """Load configuration from environment, applying explicit overrides.

    Overrides whose value is None are ignored so unset CLI options fall
    through to the environment and defaults.
    """
    return Config(**{k: v for k, v in overrides.items() if v is not None})
