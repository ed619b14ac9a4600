"""Client-side session manager for tool providers behind an AIRIS MCP Gateway.

The package keeps track of which tool providers ("servers") are active for a
session, enables additional providers on demand, caches their advertised tool
descriptions, and tears everything down in order when the session ends.

Subpackages
-----------

- ``airiscode_mcp.registry``: static provider classification and the tool
  description cache.
- ``airiscode_mcp.gateway_api``: async HTTP client and DTOs for the gateway API.
- ``airiscode_mcp.loader``: idempotent enable/disable of lazy providers.
- ``airiscode_mcp.session``: the session manager, its state and errors.
- ``airiscode_mcp.core``: settings, logging and monitoring configuration.
"""

__version__ = "0.1.0"

from .gateway_api import GatewayApiClient
from .loader import LazyServerLoader
from .registry import ProviderCategory, ToolDescriptionCache, classify
from .schemas import SessionConfig, ToolDescription
from .session import McpSessionManager, SessionState, SessionStatus

__all__ = [
    "__version__",
    "GatewayApiClient",
    "LazyServerLoader",
    "McpSessionManager",
    "ProviderCategory",
    "SessionConfig",
    "SessionState",
    "SessionStatus",
    "ToolDescription",
    "ToolDescriptionCache",
    "classify",
]
