"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from netcounter.tools.counter import INT32_MAX, INT32_MIN


class ServerSettings(BaseSettings):
    """SSE endpoint configuration."""

    name: str = Field(default="netcounter", description="Server name announced during the MCP handshake")
    host: str = Field(default="127.0.0.1", description="Interface to bind the listener to")
    port: int = Field(default=8000, ge=1, le=65535, description="TCP port to listen on")
    sse_path: str = Field(default="/sse", description="Path of the SSE stream endpoint")
    messages_path: str = Field(
        default="/messages/",
        description="Path clients POST their messages to (announced in the SSE endpoint event)",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware. "
                    "Set via SERVER__CORS_ALLOW_ORIGINS='[\"https://example.com\"]'",
    )
    counter_scope: Literal["connection", "shared"] = Field(
        default="connection",
        description="'connection' gives every SSE session its own counter; "
                    "'shared' uses one counter for all sessions.",
    )

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class CounterSettings(BaseSettings):
    """Counter configuration."""

    initial_value: int = Field(
        default=0,
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Value a new counter starts at (signed 32-bit)",
    )

    model_config = SettingsConfigDict(env_prefix="COUNTER_")


class ClientSettings(BaseSettings):
    """Remote client configuration used by the CLI."""

    url: str = Field(
        default="http://127.0.0.1:8000/sse",
        description="SSE endpoint of the server to talk to",
    )

    model_config = SettingsConfigDict(env_prefix="CLIENT_")


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: Literal["development", "production"] = Field(
        default="development", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    server: ServerSettings = Field(default_factory=ServerSettings)
    counter: CounterSettings = Field(default_factory=CounterSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
