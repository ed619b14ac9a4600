"""
Configuration Settings.

This module defines the package configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..schemas.config import (
    DEFAULT_GATEWAY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOOL_CACHE_TTL_MS,
    GatewayConfig,
    SessionConfig,
)


class Settings(BaseSettings):
    """
    Package settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Gateway Configuration
    # =====================================================================
    gateway_url: str = Field(
        default=DEFAULT_GATEWAY_URL,
        description="AIRIS MCP Gateway base URL",
        alias="MCP_GATEWAY_URL",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Bearer credential for the gateway (optional)",
        alias="MCP_API_KEY",
    )
    gateway_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Per-request gateway timeout in seconds",
        alias="MCP_GATEWAY_TIMEOUT",
    )

    # =====================================================================
    # Session Configuration
    # =====================================================================
    tool_cache_ttl_ms: int = Field(
        default=DEFAULT_TOOL_CACHE_TTL_MS,
        description="Time-to-live of cached tool descriptions in milliseconds",
        alias="MCP_TOOL_CACHE_TTL_MS",
    )
    validate_arguments: bool = Field(
        default=True,
        description="Validate tool arguments against the declared input schema before invoking",
        alias="MCP_SESSION_VALIDATE_ARGUMENTS",
    )
    log_level: str = Field(
        default="INFO",
        description="Package logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="AIRISCODE_MCP_LOG_LEVEL",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def gateway(self) -> GatewayConfig:
        """Get the gateway connection configuration."""
        return GatewayConfig(base_url=self.gateway_url, api_key=self.api_key, timeout_seconds=self.gateway_timeout)

    def session_config(self, session_id: str) -> SessionConfig:
        """Get a session configuration bound to ``session_id``."""
        return SessionConfig.from_settings(session_id, self)


settings = Settings()
