"""AIRIS MCP Gateway API client

Overview
--------
Thin, async HTTP client for the AIRIS MCP Gateway. It issues the four network
operations the session layer needs and nothing else:

- ``GET  /api/v1/status``: providers, their enabled flag and tools
- ``POST /api/v1/servers/enable``: start a provider, returning its tools
- ``POST /api/v1/servers/{name}/disable``: stop a provider
- ``POST /api/v1/mcp/invoke``: call a tool on a provider

The client is stateless apart from its configuration. Every call is a single
attempt bounded by the configured timeout; retry policy belongs to callers.

Authentication
--------------
Every request carries a fixed ``User-Agent`` identifying this client. When an
``api_key`` is configured, ``Authorization: Bearer <api_key>`` is attached.

Errors
------
- No usable response (connect error, DNS failure, timeout, redirect loop,
  undecodable body): ``GatewayUnreachableError``.
- Non-2xx status: ``GatewayStatusError`` or the per-operation subclass
  ``EnableFailedError``, ``DisableFailedError``, ``InvocationFailedError``.
- 2xx with an unparseable body: ``GatewayResponseError``.

Usage
-----
>>> async with GatewayApiClient("http://localhost:3000", api_key="secret") as gw:
...     status = await gw.get_status()
...     tools = await gw.get_always_on_tools()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, JsonValue

from .. import __version__
from ..schemas.config import DEFAULT_TIMEOUT_SECONDS, GatewayConfig
from ..schemas.core import ToolDescription
from .errors import (
    DisableFailedError,
    EnableFailedError,
    GatewayResponseError,
    GatewayStatusError,
    GatewayUnreachableError,
    InvocationFailedError,
)
from .models.dto import (
    EnableServerRequest,
    EnableServerResponse,
    GatewayStatus,
    ToolInvocationRequest,
)

CLIENT_IDENTITY = f"AIRIS-Code/{__version__}"

_M = TypeVar("_M", bound=BaseModel)


class GatewayApiClient:
    """Async HTTP client for the AIRIS MCP Gateway.

    Responsibilities
    ----------------
    - Attach the client identity and optional bearer credential to each request.
    - Map transport failures and non-2xx statuses to typed errors.
    - Parse responses into DTOs.

    The client owns the ``httpx.AsyncClient`` it creates and closes it in
    :meth:`aclose`; an injected client is left for the caller to close.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create a Gateway API client.

        Args:
            base_url: Base URL of the gateway (e.g., ``http://localhost:3000``).
            api_key: Optional credential sent as a Bearer token.
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured ``httpx.AsyncClient`` to use.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: GatewayConfig, *, client: Optional[httpx.AsyncClient] = None) -> "GatewayApiClient":
        return cls(config.base_url, api_key=config.api_key, timeout=config.timeout_seconds, client=client)

    async def __aenter__(self) -> "GatewayApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        """Build the identity header and include Authorization when configured.

        Returns:
            A dictionary with ``User-Agent`` and optional ``Authorization`` header.
        """
        headers: Dict[str, str] = {"User-Agent": CLIENT_IDENTITY}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        error_cls: Type[GatewayStatusError] = GatewayStatusError,
        json: Optional[Dict[str, JsonValue]] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        self._logger.debug("GatewayApiClient.%s: %s %s", operation, method, url)
        try:
            r = await self._client.request(method, url, headers=self._headers(), json=json, timeout=self.timeout)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise error_cls(
                f"Gateway {operation} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.RequestError as e:
            raise GatewayUnreachableError(f"Gateway {operation} unreachable: {e!r}", details=str(e)) from e
        return r

    def _parse(self, model: Type[_M], r: httpx.Response, operation: str) -> _M:
        try:
            return model.model_validate(r.json())
        except ValueError as e:
            raise GatewayResponseError(
                f"Unexpected response shape from {operation}",
                status_code=r.status_code,
                details=r.text,
            ) from e

    async def get_status(self) -> GatewayStatus:
        """Fetch gateway status.

        API
        ---
        - Method/Path: ``GET /api/v1/status``

        Returns:
            ``GatewayStatus`` with servers, always-on/lazy name lists and version.

        Raises:
            GatewayUnreachableError: On transport failure.
            GatewayStatusError: On a non-2xx status.
        """
        r = await self._request("GET", "/api/v1/status", operation="status")
        status = self._parse(GatewayStatus, r, "status")
        self._logger.debug(
            "GatewayApiClient.status: version=%s servers=%d", status.version, len(status.servers)
        )
        return status

    async def get_always_on_tools(self) -> List[ToolDescription]:
        """Return the tools of providers that are always-on and currently enabled.

        Performs a fresh status query on every call.
        """
        status = await self.get_status()
        tools = status.always_on_tools()
        self._logger.debug("GatewayApiClient.get_always_on_tools: %d tools", len(tools))
        return tools

    async def get_always_on_tools_by_server(self) -> Dict[str, List[ToolDescription]]:
        """Like :meth:`get_always_on_tools`, but grouped by provider name in gateway order."""
        status = await self.get_status()
        groups = status.always_on_tools_by_server()
        self._logger.debug("GatewayApiClient.get_always_on_tools_by_server: servers=%s", list(groups))
        return groups

    async def enable_server(self, name: str, env: Optional[Dict[str, str]] = None) -> EnableServerResponse:
        """Ask the gateway to start provider ``name``.

        API
        ---
        - Method/Path: ``POST /api/v1/servers/enable``
        - Body: ``{"serverName": name, "env": {...}}`` (``env`` omitted when absent)

        Returns:
            ``EnableServerResponse``; ``enabled`` reports whether the provider is active.

        Raises:
            GatewayUnreachableError: On transport failure.
            EnableFailedError: On a non-2xx status.
        """
        body = EnableServerRequest(server_name=name, env=env).to_payload()
        r = await self._request(
            "POST", "/api/v1/servers/enable", operation="enable_server", error_cls=EnableFailedError, json=body
        )
        resp = self._parse(EnableServerResponse, r, "enable_server")
        self._logger.debug(
            "GatewayApiClient.enable_server: name=%s enabled=%s tools=%d", name, resp.enabled, len(resp.tools)
        )
        return resp

    async def disable_server(self, name: str) -> None:
        """Ask the gateway to stop provider ``name``. The response body is ignored.

        Raises:
            GatewayUnreachableError: On transport failure.
            DisableFailedError: On a non-2xx status.
        """
        await self._request(
            "POST", f"/api/v1/servers/{name}/disable", operation="disable_server", error_cls=DisableFailedError
        )

    async def invoke_tool(self, server: str, tool: str, arguments: Dict[str, JsonValue]) -> JsonValue:
        """Invoke ``tool`` on provider ``server``.

        Returns:
            The decoded JSON result, passed through unmodified; ``None`` for an empty body.

        Raises:
            GatewayUnreachableError: On transport failure.
            InvocationFailedError: On a non-2xx status.
            GatewayResponseError: When the body is not JSON.
        """
        body = ToolInvocationRequest(server=server, tool=tool, arguments=arguments or {}).to_payload()
        self._logger.debug(
            "GatewayApiClient.invoke_tool: server=%s tool=%s args_keys=%s", server, tool, list(body["arguments"])
        )
        r = await self._request(
            "POST", "/api/v1/mcp/invoke", operation="invoke_tool", error_cls=InvocationFailedError, json=body
        )
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise GatewayResponseError(
                "Unexpected response shape from invoke_tool", status_code=r.status_code, details=r.text
            ) from e
