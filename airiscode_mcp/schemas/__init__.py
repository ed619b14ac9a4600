"""Schemas shared across the package.

Defines the Pydantic base, the ``ToolDescription`` domain model and the
gateway/session configuration types.
"""

from .config import GatewayConfig, SessionConfig
from .core import ToolDescription

__all__ = [
    "GatewayConfig",
    "SessionConfig",
    "ToolDescription",
]
