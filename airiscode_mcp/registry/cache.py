"""Time-bound cache of tool descriptions keyed by provider name.

Each entry expires ``ttl_ms`` milliseconds after it was stored. Expired
entries are evicted lazily on read.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..schemas.core import ToolDescription

DEFAULT_TTL_MS = 300_000


@dataclass(frozen=True)
class CacheEntry:
    tools: List[ToolDescription]
    inserted_at: float


class ToolDescriptionCache:
    """Per-provider store of tool descriptions with expiry.

    Attributes:
        ttl_ms: Time-to-live of each entry in milliseconds.
    """

    def __init__(self, ttl_ms: int = DEFAULT_TTL_MS, *, clock: Callable[[], float] = time.monotonic) -> None:
        """Create an empty cache.

        Args:
            ttl_ms: Time-to-live of each entry in milliseconds.
            clock: Monotonic clock returning seconds; injectable for tests.
        """
        if ttl_ms <= 0:
            raise ValueError(f"ttl_ms must be positive, got {ttl_ms}")
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._logger = logging.getLogger(__name__)

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return (now - entry.inserted_at) * 1000.0 >= self.ttl_ms

    def set(self, name: str, tools: List[ToolDescription]) -> None:
        """Store ``tools`` for ``name``, starting a fresh expiry window."""
        self._entries[name] = CacheEntry(tools=list(tools), inserted_at=self._clock())

    def get(self, name: str) -> Optional[List[ToolDescription]]:
        """Return the cached tools for ``name``, or ``None`` on a miss.

        An entry at or past its TTL is evicted and reported as a miss.
        """
        entry = self._entries.get(name)
        if entry is None:
            return None
        if self._expired(entry, self._clock()):
            self._logger.debug("ToolDescriptionCache: evicting expired entry for %s", name)
            del self._entries[name]
            return None
        return list(entry.tools)

    def clear(self, name: Optional[str] = None) -> None:
        """Evict one entry, or every entry when ``name`` is omitted."""
        if name is None:
            self._entries.clear()
        else:
            self._entries.pop(name, None)

    def all_cached(self) -> Dict[str, List[ToolDescription]]:
        """Snapshot of every non-expired entry."""
        now = self._clock()
        return {name: list(e.tools) for name, e in self._entries.items() if not self._expired(e, now)}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self.all_cached())
