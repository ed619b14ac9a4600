"""Async client, DTOs and errors for the AIRIS MCP Gateway HTTP API."""

from .client import CLIENT_IDENTITY, GatewayApiClient
from .errors import (
    DisableFailedError,
    EnableFailedError,
    GatewayApiError,
    GatewayResponseError,
    GatewayStatusError,
    GatewayUnreachableError,
    InvocationFailedError,
)

__all__ = [
    "CLIENT_IDENTITY",
    "DisableFailedError",
    "EnableFailedError",
    "GatewayApiClient",
    "GatewayApiError",
    "GatewayResponseError",
    "GatewayStatusError",
    "GatewayUnreachableError",
    "InvocationFailedError",
]
