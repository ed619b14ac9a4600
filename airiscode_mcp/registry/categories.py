"""Static classification of provider names.

A single table maps each known provider name to its category, so a name can
never be listed as both always-on and lazy. Names missing from the table are
``UNKNOWN`` and must not be auto-enabled by callers.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class ProviderCategory(str, Enum):
    ALWAYS_ON = "always_on"
    LAZY = "lazy"
    UNKNOWN = "unknown"


PROVIDER_CATEGORIES: Mapping[str, ProviderCategory] = MappingProxyType(
    {
        # Activated during session initialization
        "filesystem": ProviderCategory.ALWAYS_ON,
        "context7": ProviderCategory.ALWAYS_ON,
        "sequential-thinking": ProviderCategory.ALWAYS_ON,
        "serena": ProviderCategory.ALWAYS_ON,
        "mindbase": ProviderCategory.ALWAYS_ON,
        "self-management": ProviderCategory.ALWAYS_ON,
        # Activated on explicit request
        "playwright": ProviderCategory.LAZY,
        "puppeteer": ProviderCategory.LAZY,
        "chrome-devtools": ProviderCategory.LAZY,
        "magic": ProviderCategory.LAZY,
        "tavily": ProviderCategory.LAZY,
        "supabase": ProviderCategory.LAZY,
        "mongodb": ProviderCategory.LAZY,
        "notion": ProviderCategory.LAZY,
        "slack": ProviderCategory.LAZY,
        "figma": ProviderCategory.LAZY,
        "mcp-postgres-server": ProviderCategory.LAZY,
        "morphllm-fast-apply": ProviderCategory.LAZY,
        "sqlite": ProviderCategory.LAZY,
    }
)


def classify(name: str, table: Mapping[str, ProviderCategory] = PROVIDER_CATEGORIES) -> ProviderCategory:
    """Return the category of ``name``; ``UNKNOWN`` when it is not registered."""
    return table.get(name, ProviderCategory.UNKNOWN)


def is_always_on(name: str, table: Mapping[str, ProviderCategory] = PROVIDER_CATEGORIES) -> bool:
    return classify(name, table) is ProviderCategory.ALWAYS_ON


def is_lazy(name: str, table: Mapping[str, ProviderCategory] = PROVIDER_CATEGORIES) -> bool:
    return classify(name, table) is ProviderCategory.LAZY


def _names_in(category: ProviderCategory, table: Mapping[str, ProviderCategory]) -> Tuple[str, ...]:
    return tuple(name for name, c in table.items() if c is category)


def always_on_servers(table: Mapping[str, ProviderCategory] = PROVIDER_CATEGORIES) -> Tuple[str, ...]:
    return _names_in(ProviderCategory.ALWAYS_ON, table)


def lazy_servers(table: Mapping[str, ProviderCategory] = PROVIDER_CATEGORIES) -> Tuple[str, ...]:
    return _names_in(ProviderCategory.LAZY, table)
