from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from .base import BaseSchema

if TYPE_CHECKING:
    from ..core.config import Settings

DEFAULT_GATEWAY_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_TOOL_CACHE_TTL_MS = 300_000


class GatewayConfig(BaseSchema):
    base_url: str = Field(
        DEFAULT_GATEWAY_URL,
        description="Base URL of the AIRIS MCP Gateway.",
        examples=["http://localhost:3000", "https://mcp-gateway.internal"],
        min_length=1,
        max_length=512,
    )
    api_key: Optional[str] = Field(
        None,
        description="Optional access credential sent as 'Authorization: Bearer <api_key>'.",
        examples=["gw_123e4567-e89b-12d3-a456-426614174000"],
        min_length=1,
        max_length=512,
    )
    timeout_seconds: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        description="Per-request timeout in seconds for every gateway call.",
        gt=0.0,
        le=600.0,
        examples=[5.0, 30.0],
    )


class SessionConfig(GatewayConfig):
    session_id: str = Field(
        ...,
        description="Identifier of the logical session bound to one gateway connection.",
        min_length=1,
        max_length=128,
        examples=["chat-1717171717"],
    )
    auto_connect: bool = Field(
        True,
        description="Whether entering the session as an async context manager initializes it.",
    )
    validate_arguments: bool = Field(
        True,
        description="Check tool arguments against the tool's declared input schema before invoking it.",
    )
    tool_cache_ttl_ms: Optional[int] = Field(
        None,
        description="When set, the session keeps a tool description cache with this TTL in milliseconds.",
        gt=0,
        examples=[DEFAULT_TOOL_CACHE_TTL_MS],
    )

    @property
    def gateway(self) -> GatewayConfig:
        return GatewayConfig(base_url=self.base_url, api_key=self.api_key, timeout_seconds=self.timeout_seconds)

    @classmethod
    def from_settings(cls, session_id: str, settings: Optional["Settings"] = None) -> "SessionConfig":
        """Build a session config from environment-bound settings.

        Args:
            session_id: Identifier for the new session.
            settings: Settings to read; the module-level ``settings`` by default.
        """
        if settings is None:
            from ..core.config import settings as default_settings

            settings = default_settings
        return cls(
            session_id=session_id,
            base_url=settings.gateway_url,
            api_key=settings.api_key,
            timeout_seconds=settings.gateway_timeout,
            validate_arguments=settings.validate_arguments,
            tool_cache_ttl_ms=settings.tool_cache_ttl_ms,
        )
