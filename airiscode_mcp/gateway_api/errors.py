"""Error types specific to the Gateway API layer.

Purpose:
- Provide typed exceptions thrown by `GatewayApiClient`.
- Expose HTTP-oriented context (e.g., status code, error body) for diagnosis.

Usage:
- Catch `GatewayApiError` for any gateway failure.
- Catch `GatewayUnreachableError` when no response was received at all
  (connection refused, DNS failure, timeout).
- Catch `GatewayStatusError` (or one of its per-operation subclasses) when the
  gateway answered with a non-2xx status and inspect `status_code`/`details`.
"""

from __future__ import annotations

from typing import Any, Optional


class GatewayApiError(Exception):
    """Base error for Gateway API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the server (e.g., response text).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class GatewayUnreachableError(GatewayApiError):
    """Raised when the request produced no usable response (transport failure,
    timeout, too many redirects, undecodable body)."""


class GatewayStatusError(GatewayApiError):
    """Raised when the gateway answers with a non-2xx status."""


class EnableFailedError(GatewayStatusError):
    """Raised when ``POST /api/v1/servers/enable`` returns a non-2xx status."""


class DisableFailedError(GatewayStatusError):
    """Raised when ``POST /api/v1/servers/{name}/disable`` returns a non-2xx status."""


class InvocationFailedError(GatewayStatusError):
    """Raised when ``POST /api/v1/mcp/invoke`` returns a non-2xx status."""


class GatewayResponseError(GatewayApiError):
    """Raised when a 2xx response body cannot be parsed into the expected shape."""
