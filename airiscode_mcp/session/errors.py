"""Error types for the session layer.

Gateway failures are not wrapped here: ``enable_lazy_server``,
``disable_lazy_server`` and ``invoke_tool`` let ``GatewayApiError`` subclasses
through unchanged. Only ``initialize`` adds context via
``InitializationFailedError``.
"""

from __future__ import annotations

from typing import Dict, List


class McpSessionError(Exception):
    """Base error for all session exceptions."""


class SessionNotInitializedError(McpSessionError):
    """Raised when an operation needs a connected session but it is not connected."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Session not initialized: '{operation}' requires a connected session")
        self.operation = operation


class InitializationFailedError(McpSessionError):
    """Raised when ``initialize`` could not load the always-on tools."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to initialize MCP session: {cause}")
        self.cause = cause


class CleanupFailedError(McpSessionError):
    """Raised when some providers could not be disabled during cleanup.

    Providers that were disabled successfully are already reconciled; the ones
    in ``failures`` remain enabled and a later ``cleanup`` retries them.
    """

    def __init__(self, failures: Dict[str, Exception]) -> None:
        names = ", ".join(sorted(failures))
        super().__init__(f"Failed to disable {len(failures)} server(s) during cleanup: {names}")
        self.failures = failures


class SessionBusyError(McpSessionError):
    """Raised when a mutating call overlaps another one on the same session."""

    def __init__(self, operation: str, running: str) -> None:
        super().__init__(f"Cannot run '{operation}' while '{running}' is in progress on this session")
        self.operation = operation
        self.running = running


class ToolArgumentsError(McpSessionError):
    """Raised when tool arguments do not match the tool's declared input schema."""

    def __init__(self, server: str, tool: str, problems: List[str]) -> None:
        super().__init__(f"Invalid arguments for '{tool}' on '{server}': {'; '.join(problems)}")
        self.server = server
        self.tool = tool
        self.problems = problems
