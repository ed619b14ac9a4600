"""Lazy provider loader

Tracks which lazy providers this process has enabled on the gateway and makes
enable/disable idempotent:

- enabling an already-enabled provider returns ``[]`` without a network call;
- disabling a provider that was never enabled returns without a network call.

A provider is recorded as enabled only once the gateway confirmed
``enabled: true``. Gateway errors propagate unchanged and leave the enabled
set untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..gateway_api.client import GatewayApiClient
from ..registry.cache import ToolDescriptionCache
from ..schemas.core import ToolDescription

ToolsAddedCallback = Callable[[str, List[ToolDescription]], None]
ToolsRemovedCallback = Callable[[str], None]


class LazyServerLoader:
    """Idempotent enable/disable of lazy providers.

    The insertion-ordered ``_enabled`` dict is the single source of truth for
    "is this provider enabled"; it is used as an ordered set.
    """

    def __init__(
        self,
        client: GatewayApiClient,
        *,
        on_tools_added: Optional[ToolsAddedCallback] = None,
        on_tools_removed: Optional[ToolsRemovedCallback] = None,
        cache: Optional[ToolDescriptionCache] = None,
    ) -> None:
        """Create a loader.

        Args:
            client: Gateway client used for enable/disable calls.
            on_tools_added: Called with ``(name, tools)`` after a confirmed enable.
            on_tools_removed: Called with ``name`` after a successful disable.
            cache: Optional cache written on confirmed enables and evicted on disables.
        """
        self._client = client
        self._on_tools_added = on_tools_added
        self._on_tools_removed = on_tools_removed
        self._cache = cache
        self._enabled: Dict[str, None] = {}
        self._logger = logging.getLogger(__name__)

    async def enable_server(self, name: str, env: Optional[Dict[str, str]] = None) -> List[ToolDescription]:
        """Enable provider ``name`` and return its tools.

        Returns:
            The provider's tools on a confirmed enable; ``[]`` when the provider
            was already enabled or the gateway did not confirm activation.

        Raises:
            GatewayApiError: Any gateway failure, unmodified.
        """
        if name in self._enabled:
            self._logger.debug("LazyServerLoader.enable_server: %s already enabled, skipping", name)
            return []

        resp = await self._client.enable_server(name, env)
        if not resp.enabled:
            self._logger.warning("LazyServerLoader.enable_server: gateway accepted %s but did not enable it", name)
            return []

        tools = list(resp.tools)
        self._enabled[name] = None
        if self._cache is not None:
            self._cache.set(name, tools)
        if self._on_tools_added is not None:
            self._on_tools_added(name, tools)
        self._logger.info("LazyServerLoader: enabled %s with %d tools", name, len(tools))
        return tools

    async def disable_server(self, name: str) -> None:
        """Disable provider ``name``; a no-op when it is not enabled.

        Raises:
            GatewayApiError: Any gateway failure; the provider stays recorded as enabled.
        """
        if name not in self._enabled:
            self._logger.debug("LazyServerLoader.disable_server: %s not enabled, nothing to do", name)
            return

        await self._client.disable_server(name)
        del self._enabled[name]
        if self._cache is not None:
            self._cache.clear(name)
        if self._on_tools_removed is not None:
            self._on_tools_removed(name)
        self._logger.info("LazyServerLoader: disabled %s", name)

    def is_enabled(self, name: str) -> bool:
        return name in self._enabled

    def list_enabled(self) -> List[str]:
        """Names of enabled providers in the order they were enabled."""
        return list(self._enabled)
