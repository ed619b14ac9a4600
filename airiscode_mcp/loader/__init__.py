"""On-demand enabling of lazy providers."""

from .lazy import LazyServerLoader, ToolsAddedCallback, ToolsRemovedCallback

__all__ = [
    "LazyServerLoader",
    "ToolsAddedCallback",
    "ToolsRemovedCallback",
]
