"""Session lifecycle, state and errors."""

from .errors import (
    CleanupFailedError,
    InitializationFailedError,
    McpSessionError,
    SessionBusyError,
    SessionNotInitializedError,
    ToolArgumentsError,
)
from .manager import McpSessionManager
from .state import SessionState, SessionStatus
from .validation import validate_tool_arguments

__all__ = [
    "CleanupFailedError",
    "InitializationFailedError",
    "McpSessionError",
    "McpSessionManager",
    "SessionBusyError",
    "SessionNotInitializedError",
    "SessionState",
    "SessionStatus",
    "ToolArgumentsError",
    "validate_tool_arguments",
]
