"""Error types surfaced by Kite MCP tools."""

from __future__ import annotations


class ToolError(Exception):
    """Base error for tool invocation failures.

    ``str(error)`` is the bare message so it can be shown to agents as-is.
    """

    code = "TOOL_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InitializationError(ToolError):
    """Raised when a tool is called without an initialized Kite client."""

    code = "NOT_INITIALIZED"


class UnknownToolError(ToolError):
    code = "UNKNOWN_TOOL"
