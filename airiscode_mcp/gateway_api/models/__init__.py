from .dto import (
    EnableServerRequest,
    EnableServerResponse,
    GatewayStatus,
    ProviderDescriptor,
    ToolInvocationRequest,
)

__all__ = [
    "EnableServerRequest",
    "EnableServerResponse",
    "GatewayStatus",
    "ProviderDescriptor",
    "ToolInvocationRequest",
]
