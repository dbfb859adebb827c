"""Validator settings loaded from environment variables."""

import logging
import shlex
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the Mermaid validator.

    All variables share the ``MERMAID_`` prefix, e.g. ``MERMAID_CLI=mmdc``.
    The documentation root and file pattern are fixed and not configurable.
    """

    model_config = SettingsConfigDict(
        env_prefix="MERMAID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Mermaid CLI
    # May be a multi-word command, e.g. "npx --yes @mermaid-js/mermaid-cli"
    cli: str = Field(
        default="mmdc",
        description="Command used to invoke the Mermaid CLI",
    )
    puppeteer_config: Path | None = Field(
        default=None,
        description="Puppeteer config file passed to the Mermaid CLI with -p",
    )
    cli_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for a single Mermaid CLI invocation",
        ge=1.0,
        le=600.0,
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit log records as JSON instead of plain text",
    )

    @field_validator("cli")
    @classmethod
    def validate_cli(cls, v: str) -> str:
        """Reject an empty CLI command or one that cannot be split into arguments."""
        if not v.strip():
            raise ValueError("Mermaid CLI command must not be empty")
        try:
            shlex.split(v)
        except ValueError as e:
            raise ValueError(f"Mermaid CLI command is not valid shell syntax: {e}") from e
        return v.strip()

    @field_validator("puppeteer_config", mode="before")
    @classmethod
    def validate_puppeteer_config(cls, v: object) -> object:
        """Treat an empty value as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
