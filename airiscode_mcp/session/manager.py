"""MCP session manager

Top-level orchestrator for one logical session against an AIRIS MCP Gateway.

Lifecycle
---------
``UNINITIALIZED --initialize()--> CONNECTED --cleanup()--> DISCONNECTED``

A disconnected session may be initialized again. ``enable_lazy_server``,
``disable_lazy_server`` and ``invoke_tool`` require ``CONNECTED`` and raise
``SessionNotInitializedError`` otherwise.

Concurrency
-----------
A session carries no lock. Mutating calls (``initialize``,
``enable_lazy_server``, ``disable_lazy_server``, ``cleanup``) must not
overlap; an overlapping call raises ``SessionBusyError`` instead of
interleaving with the one in progress. ``cleanup`` is the only operation that
issues requests concurrently: it disables every enabled provider in parallel.

Usage
-----
>>> config = SessionConfig(session_id="chat-1", base_url="http://localhost:3000")
>>> async with McpSessionManager(config) as session:
...     await session.enable_lazy_server("playwright", {"PLAYWRIGHT_BROWSER": "chromium"})
...     result = await session.invoke_tool("filesystem", "read_file", {"path": "README.md"})
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from pydantic import JsonValue

from ..core.monitoring import log_session_event
from ..gateway_api.client import GatewayApiClient
from ..gateway_api.errors import GatewayApiError
from ..loader.lazy import LazyServerLoader
from ..registry.cache import ToolDescriptionCache
from ..schemas.config import SessionConfig
from ..schemas.core import ToolDescription
from .errors import (
    CleanupFailedError,
    InitializationFailedError,
    SessionBusyError,
    SessionNotInitializedError,
    ToolArgumentsError,
)
from .state import SessionState, SessionStatus
from .validation import validate_tool_arguments


class McpSessionManager:
    """Owns the state of one session and composes the gateway client and loader.

    Args:
        config: Session and gateway configuration.
        client: Optional gateway client; one is built from ``config`` otherwise
            and closed when the session is used as an async context manager.
        cache: Optional tool description cache. When omitted and
            ``config.tool_cache_ttl_ms`` is set, a cache with that TTL is created.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        client: Optional[GatewayApiClient] = None,
        cache: Optional[ToolDescriptionCache] = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or GatewayApiClient.from_config(config.gateway)
        if cache is None and config.tool_cache_ttl_ms is not None:
            cache = ToolDescriptionCache(config.tool_cache_ttl_ms)
        self._cache = cache
        self._loader = LazyServerLoader(
            self._client,
            on_tools_added=self._record_lazy_tools,
            on_tools_removed=self._forget_lazy_tools,
            cache=cache,
        )
        self._state = SessionState(session_id=config.session_id)
        self._always_on_by_server: Dict[str, List[ToolDescription]] = {}
        self._status = SessionStatus.UNINITIALIZED
        self._busy_with: Optional[str] = None
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "McpSessionManager":
        if self._config.auto_connect:
            try:
                await self.initialize()
            except BaseException:
                # __aexit__ does not run when entering fails
                if self._owns_client:
                    await self._client.aclose()
                raise
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        try:
            await self.cleanup()
        finally:
            if self._owns_client:
                await self._client.aclose()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def session_id(self) -> str:
        return self._state.session_id

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def loader(self) -> LazyServerLoader:
        return self._loader

    @property
    def cache(self) -> Optional[ToolDescriptionCache]:
        return self._cache

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _exclusive(self, operation: str) -> AsyncIterator[None]:
        if self._busy_with is not None:
            raise SessionBusyError(operation, self._busy_with)
        self._busy_with = operation
        try:
            yield
        finally:
            self._busy_with = None

    def _require_connected(self, operation: str) -> None:
        if self._status is not SessionStatus.CONNECTED:
            raise SessionNotInitializedError(operation)

    def _record_lazy_tools(self, name: str, tools: List[ToolDescription]) -> None:
        self._state.lazy_tools[name] = list(tools)

    def _forget_lazy_tools(self, name: str) -> None:
        self._state.lazy_tools.pop(name, None)

    def _lookup_tool(self, server: str, tool: str) -> Optional[ToolDescription]:
        """Return ``tool`` as advertised by ``server`` itself, or ``None``."""
        candidates = self._state.lazy_tools.get(server)
        if candidates is None:
            candidates = self._always_on_by_server.get(server, [])
        return next((t for t in candidates if t.name == tool), None)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load always-on tools and mark the session connected.

        Raises:
            InitializationFailedError: When the gateway status query fails; the
                session keeps its previous state.
        """
        async with self._exclusive("initialize"):
            try:
                groups = await self._client.get_always_on_tools_by_server()
            except GatewayApiError as e:
                self._logger.warning("McpSessionManager[%s]: initialize failed: %s", self.session_id, e)
                raise InitializationFailedError(e) from e
            tools = [t for group in groups.values() for t in group]
            self._always_on_by_server = groups
            self._state.always_on_tools = tools
            self._state.connected = True
            self._state.started_at = datetime.now(timezone.utc)
            self._status = SessionStatus.CONNECTED
            self._logger.info(
                "McpSessionManager[%s]: connected with %d always-on tools", self.session_id, len(tools)
            )
            log_session_event("initialized", self.session_id, always_on_tools=len(tools))

    async def cleanup(self) -> None:
        """Disable every enabled lazy provider in parallel and disconnect.

        Safe to call repeatedly and with no enabled providers. Providers that
        disable successfully are always reconciled, even when others fail.

        Raises:
            CleanupFailedError: When at least one provider could not be
                disabled; the session stays connected with those providers
                still enabled.
        """
        async with self._exclusive("cleanup"):
            enabled = self._loader.list_enabled()
            if enabled:
                results = await asyncio.gather(
                    *(self._loader.disable_server(name) for name in enabled), return_exceptions=True
                )
                failures: Dict[str, Exception] = {}
                for name, result in zip(enabled, results):
                    if isinstance(result, Exception):
                        failures[name] = result
                    elif isinstance(result, BaseException):
                        raise result
                if failures:
                    self._logger.warning(
                        "McpSessionManager[%s]: cleanup left %d server(s) enabled: %s",
                        self.session_id,
                        len(failures),
                        sorted(failures),
                    )
                    raise CleanupFailedError(failures)

            self._state.connected = False
            self._state.lazy_tools.clear()
            if self._status is SessionStatus.CONNECTED:
                self._status = SessionStatus.DISCONNECTED
                self._logger.info("McpSessionManager[%s]: disconnected", self.session_id)
                log_session_event("cleaned_up", self.session_id, disabled_servers=len(enabled))

    # ------------------------------------------------------------------
    # Lazy providers
    # ------------------------------------------------------------------

    async def enable_lazy_server(self, name: str, env: Optional[Dict[str, str]] = None) -> List[ToolDescription]:
        """Enable lazy provider ``name`` and return its newly added tools.

        Returns ``[]`` when the provider is already enabled or the gateway did
        not confirm activation. Gateway errors pass through unchanged.
        """
        self._require_connected("enable_lazy_server")
        async with self._exclusive("enable_lazy_server"):
            tools = await self._loader.enable_server(name, env)
            if tools:
                log_session_event("server_enabled", self.session_id, server=name, tools=len(tools))
            return tools

    async def disable_lazy_server(self, name: str) -> None:
        """Disable lazy provider ``name``; a no-op when it is not enabled."""
        self._require_connected("disable_lazy_server")
        async with self._exclusive("disable_lazy_server"):
            was_enabled = self._loader.is_enabled(name)
            await self._loader.disable_server(name)
            if was_enabled:
                log_session_event("server_disabled", self.session_id, server=name)

    def is_enabled(self, name: str) -> bool:
        return self._loader.is_enabled(name)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    async def invoke_tool(self, server: str, tool: str, arguments: Dict[str, JsonValue]) -> JsonValue:
        """Invoke ``tool`` on ``server`` through the gateway.

        When argument validation is enabled and ``server`` advertised ``tool`` to
        this session, the arguments are checked against its input schema first.

        Raises:
            SessionNotInitializedError: When the session is not connected.
            ToolArgumentsError: When the arguments do not match the schema.
            GatewayApiError: Any gateway failure, unmodified.
        """
        self._require_connected("invoke_tool")
        arguments = arguments or {}
        if self._config.validate_arguments:
            description = self._lookup_tool(server, tool)
            if description is not None:
                problems = validate_tool_arguments(description, arguments)
                if problems:
                    raise ToolArgumentsError(server, tool, problems)
        return await self._client.invoke_tool(server, tool, arguments)

    def get_all_tools(self) -> List[ToolDescription]:
        """Always-on tools first, then lazy tools grouped by provider in enable order."""
        tools = list(self._state.always_on_tools)
        for group in self._state.lazy_tools.values():
            tools.extend(group)
        return tools

    def find_tool(self, name: str) -> Optional[Tuple[Optional[str], ToolDescription]]:
        """Find a tool by name.

        Returns:
            ``(provider, tool)`` for a lazy provider's tool, ``(None, tool)`` for an
            always-on tool, or ``None`` when the session does not know the tool.
        """
        for t in self._state.always_on_tools:
            if t.name == name:
                return None, t
        for provider, group in self._state.lazy_tools.items():
            for t in group:
                if t.name == name:
                    return provider, t
        return None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def get_state(self) -> SessionState:
        """Return a snapshot of the session state; mutating it has no effect on the session."""
        return self._state.model_copy(deep=True)

    def is_connected(self) -> bool:
        return self._state.connected
