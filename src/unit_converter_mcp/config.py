"""Configuration management for the Unit Converter MCP Server.

Uses pydantic-settings for environment variable support with validation.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional


class ServerConfig(BaseSettings):
    """Server configuration with environment variable support."""

    # Server settings
    server_transport: str = Field(
        default="stdio",
        description="MCP transport type: sse or stdio"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(
        default="json",
        description="Log format: json or console"
    )

    # Result rendering
    result_precision: Optional[int] = Field(
        default=None,
        ge=0,
        le=15,
        description="Decimal places in rendered results (None for shortest exact form)"
    )

    model_config = {
        "env_prefix": "UNIT_CONVERTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Singleton instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the configuration singleton."""
    global _config
    if _config is None:
        _config = ServerConfig()
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (for testing)."""
    global _config
    _config = None
