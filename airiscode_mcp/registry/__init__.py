"""Provider classification and tool description caching."""

from .cache import CacheEntry, ToolDescriptionCache
from .categories import (
    PROVIDER_CATEGORIES,
    ProviderCategory,
    always_on_servers,
    classify,
    is_always_on,
    is_lazy,
    lazy_servers,
)

__all__ = [
    "CacheEntry",
    "PROVIDER_CATEGORIES",
    "ProviderCategory",
    "ToolDescriptionCache",
    "always_on_servers",
    "classify",
    "is_always_on",
    "is_lazy",
    "lazy_servers",
]
