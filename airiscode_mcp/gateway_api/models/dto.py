"""Gateway API DTO models

Overview
--------
Pydantic DTOs for the AIRIS MCP Gateway HTTP API. These models centralize the
contracts for request/response payloads so that the client stays thin and the
session layer works with typed objects only.

Design guidelines
-----------------
- Keep field names and aliases consistent with the wire schema (``serverName``,
  ``alwaysOn``, ``inputSchema``).
- Response models ignore unknown keys so gateway upgrades do not break parsing.
- Request models forbid unknown keys.

Endpoint mapping
----------------
- ``GET /api/v1/status`` → ``GatewayStatus``
- ``POST /api/v1/servers/enable`` ← ``EnableServerRequest`` → ``EnableServerResponse``
- ``POST /api/v1/servers/{name}/disable`` → no body
- ``POST /api/v1/mcp/invoke`` ← ``ToolInvocationRequest`` → arbitrary JSON
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import ConfigDict, Field, JsonValue

from ...schemas.base import BaseSchema
from ...schemas.core import ToolDescription


class _ResponseSchema(BaseSchema):
    model_config = ConfigDict(extra="ignore")


class ProviderDescriptor(_ResponseSchema):
    """One provider ("server") as reported by the gateway status endpoint."""

    name: str = Field(..., description="Provider name.", min_length=1, examples=["filesystem"])
    enabled: bool = Field(False, description="Whether the gateway currently runs this provider.")
    tools: List[ToolDescription] = Field(
        default_factory=list, description="Tools advertised by the provider, in gateway order."
    )


class GatewayStatus(_ResponseSchema):
    """Payload of ``GET /api/v1/status``.

    Examples:
        >>> GatewayStatus.model_validate({"version": "1.0", "servers": [], "alwaysOn": ["filesystem"], "lazy": []})
        GatewayStatus(version='1.0', servers=[], always_on=['filesystem'], lazy=[])
    """

    version: Optional[str] = Field(None, description="Gateway version string.", examples=["1.2.0"])
    servers: List[ProviderDescriptor] = Field(default_factory=list, description="All providers known to the gateway.")
    always_on: List[str] = Field(default_factory=list, description="Names the gateway treats as always-on.")
    lazy: List[str] = Field(default_factory=list, description="Names the gateway treats as lazily enabled.")

    def always_on_tools_by_server(self) -> Dict[str, List[ToolDescription]]:
        """Tools of providers that are always-on AND enabled, keyed by provider in gateway order."""
        names = set(self.always_on)
        return {s.name: list(s.tools) for s in self.servers if s.name in names and s.enabled}

    def always_on_tools(self) -> List[ToolDescription]:
        """Flatten :meth:`always_on_tools_by_server`, preserving gateway order."""
        return [t for tools in self.always_on_tools_by_server().values() for t in tools]


class EnableServerRequest(BaseSchema):
    """Body of ``POST /api/v1/servers/enable``."""

    server_name: str = Field(..., description="Provider to enable.", min_length=1, examples=["playwright"])
    env: Optional[Dict[str, str]] = Field(
        None,
        description="Provider-specific startup environment variables.",
        examples=[{"PLAYWRIGHT_BROWSER": "chromium"}],
    )

    def to_payload(self) -> Dict[str, JsonValue]:
        return self.model_dump(by_alias=True, exclude_none=True)


class EnableServerResponse(_ResponseSchema):
    """Payload of ``POST /api/v1/servers/enable``.

    ``enabled`` may be ``False`` when the gateway accepted the request but did
    not activate the provider.
    """

    server_name: str = Field(..., description="Provider the response refers to.")
    enabled: bool = Field(False, description="Whether the provider is now active.")
    tools: List[ToolDescription] = Field(default_factory=list, description="Tools advertised after enabling.")


class ToolInvocationRequest(BaseSchema):
    """Body of ``POST /api/v1/mcp/invoke``."""

    server: str = Field(..., description="Provider hosting the tool.", min_length=1)
    tool: str = Field(..., description="Tool name.", min_length=1)
    arguments: Dict[str, JsonValue] = Field(default_factory=dict, description="Tool arguments.")

    def to_payload(self) -> Dict[str, JsonValue]:
        return self.model_dump(by_alias=True)
