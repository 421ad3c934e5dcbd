"""
Tool results — the uniform content-block envelope returned by every tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.tools.errors import ResumeServerError


@dataclass(frozen=True)
class ContentBlock:
    text: str
    type: str = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Ordered content blocks, optional structured data, and error metadata when the call failed."""

    content: tuple[ContentBlock, ...]
    is_error: bool = False
    error_kind: str | None = None
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)
    structured_content: dict[str, Any] | None = None

    @classmethod
    def text(cls, text: str, structured_content: dict[str, Any] | None = None) -> "ToolResult":
        return cls(content=(ContentBlock(text),), structured_content=structured_content)

    @classmethod
    def from_error(cls, error: ResumeServerError) -> "ToolResult":
        details: dict[str, Any] = {}
        if hasattr(error, "field"):
            details = {"field": error.field, "reason": error.reason}
        return cls(
            content=(ContentBlock(f"❌ {error.message}"),),
            is_error=True,
            error_kind=error.kind,
            retryable=error.retryable,
            details=details,
        )

    @property
    def text_content(self) -> str:
        """All text blocks joined, for callers that only render plain text."""
        return "\n\n".join(block.text for block in self.content if block.type == "text")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"content": [block.to_dict() for block in self.content]}
        if self.structured_content is not None:
            result["structuredContent"] = self.structured_content
        if self.is_error:
            result["isError"] = True
            result["error"] = {
                "kind": self.error_kind,
                "retryable": self.retryable,
                **self.details,
            }
        return result
