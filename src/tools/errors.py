"""
Error kinds raised while resolving and running a tool.

Each error carries a stable `kind` name and a `retryable` flag; the
dispatcher turns them into error-shaped tool results for the caller.
"""

from __future__ import annotations


class ResumeServerError(Exception):
    """Base class for every error surfaced to a tool caller."""

    kind = "ResumeServerError"
    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownTool(ResumeServerError):
    kind = "UnknownTool"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArguments(ResumeServerError):
    """Tool arguments failed schema validation."""

    kind = "InvalidArguments"

    def __init__(self, tool: str, field: str, reason: str) -> None:
        super().__init__(f"Invalid arguments for {tool}: {field}: {reason}")
        self.tool = tool
        self.field = field
        self.reason = reason


class DocumentUnavailable(ResumeServerError):
    """The resume document could not be loaded. Safe to retry."""

    kind = "DocumentUnavailable"
    retryable = True

    def __init__(self, reason: str) -> None:
        super().__init__(f"Resume document unavailable: {reason}")
        self.reason = reason


class InternalFault(ResumeServerError):
    """Opaque stand-in for an unexpected handler failure."""

    kind = "InternalFault"

    def __init__(self, tool: str) -> None:
        super().__init__(f"Internal error while running {tool}")
        self.tool = tool
