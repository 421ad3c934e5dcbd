"""
Resume MCP Server — Entry Point

FastMCP server exposing the resume tools (getResume, getResumeSummary,
searchResume, ping) to any MCP-compatible AI assistant.

Usage:
    # stdio (default, for Claude Desktop and similar hosts)
    python server.py

    # SSE / streamable HTTP with CORS and a landing page at /
    MCP_TRANSPORT=sse python server.py

    # Via package entry point
    resume-mcp-server
"""

from __future__ import annotations

import logging
from typing import Annotated

import uvicorn
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import HTMLResponse

from src.config import Settings, configure_logging
from src.services.dispatcher import Dispatcher
from src.services.landing_page import render_landing_page
from src.storage.resume_store import ResumeStore
from src.tools.catalog import build_registry

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["Content-Type", "Authorization", "mcp-protocol-version"]
CORS_MAX_AGE = 86400


async def _unwrap(dispatcher: Dispatcher, tool_name: str, arguments: dict | None = None) -> str:
    """Dispatch a call and hand the text back, raising ToolError for error results."""
    result = await dispatcher.dispatch(tool_name, arguments or {})
    if result.is_error:
        raise ToolError(result.text_content)
    return result.text_content


def create_server(settings: Settings, store: ResumeStore | None = None) -> FastMCP:
    """Build the FastMCP server, wiring store → registry → dispatcher."""
    store = store or ResumeStore.from_path(settings.resume_path)
    registry = build_registry(store)
    dispatcher = Dispatcher(registry)

    mcp = FastMCP(settings.server_name, version=settings.server_version)

    # ── Resume Tools ─────────────────────────────────────────────

    @mcp.tool(name="getResume", description=registry.resolve("getResume").description)
    async def tool_get_resume() -> str:
        return await _unwrap(dispatcher, "getResume")

    @mcp.tool(name="getResumeSummary", description=registry.resolve("getResumeSummary").description)
    async def tool_get_resume_summary() -> str:
        return await _unwrap(dispatcher, "getResumeSummary")

    @mcp.tool(name="searchResume", description=registry.resolve("searchResume").description)
    async def tool_search_resume(
        query: Annotated[str, Field(description="Search query to find in resume")],
    ) -> str:
        return await _unwrap(dispatcher, "searchResume", {"query": query})

    # ── Health ───────────────────────────────────────────────────

    @mcp.tool(name="ping", description=registry.resolve("ping").description)
    async def tool_ping() -> str:
        return await _unwrap(dispatcher, "ping")

    # ── Landing Page (network transports only) ──────────────────

    @mcp.custom_route("/", methods=["GET"])
    async def landing_page(request: Request) -> HTMLResponse:
        return HTMLResponse(render_landing_page(
            registry,
            server_name=settings.server_name,
            server_url=settings.server_url,
            transport=settings.transport,
        ))

    return mcp


def create_http_app(mcp: FastMCP, settings: Settings):
    """ASGI app for the SSE or streamable HTTP transport, with CORS applied."""
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=CORS_ALLOW_HEADERS,
            max_age=CORS_MAX_AGE,
        )
    ]
    return mcp.http_app(transport=settings.transport, middleware=middleware)


def run(settings: Settings) -> None:
    mcp = create_server(settings)
    if settings.transport == "stdio":
        logger.info("Starting %s on stdio", settings.server_name)
        mcp.run()
        return

    logger.info(
        "Starting %s (%s) on %s:%d",
        settings.server_name, settings.transport, settings.host, settings.port,
    )
    uvicorn.run(
        create_http_app(mcp, settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    run(settings)


# ── Server Entry Point ──────────────────────────────────────

if __name__ == "__main__":
    main()
