"""
MCP Tool: ping — liveness check that never touches the resume.
"""

from __future__ import annotations

DESCRIPTION = "Test connectivity and server status"
PONG = "🏓 Pong! Resume MCP server is working correctly."


async def ping() -> str:
    return PONG
