"""
Dispatcher — the single entry point the transport layer calls.

Forwards `(tool_name, arguments)` to the tool registry and guarantees a
ToolResult comes back: registry and store errors become error results,
and any unexpected exception becomes an opaque InternalFault.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from src.tools.errors import (
    DocumentUnavailable,
    InternalFault,
    ResumeServerError,
)
from src.tools.registry import ToolRegistry
from src.tools.result import ToolResult

logger = logging.getLogger(__name__)


class Dispatcher:
    """Stateless adapter between the transport and the tool registry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def dispatch(self, tool_name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        logger.debug("Dispatching %s with %s", tool_name, arguments)
        try:
            return await self._registry.invoke(tool_name, arguments)
        except DocumentUnavailable as e:
            logger.error("%s failed: %s", tool_name, e.message)
            return ToolResult.from_error(e)
        except ResumeServerError as e:
            logger.warning("%s rejected (%s): %s", tool_name, e.kind, e.message)
            return ToolResult.from_error(e)
        except Exception:
            logger.exception("Unexpected error in tool %s", tool_name)
            return ToolResult.from_error(InternalFault(tool_name))
