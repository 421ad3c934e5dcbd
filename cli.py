"""
Resume MCP — CLI Entry Point

Typer-based CLI for querying the resume without an MCP host.
Every command goes through the same dispatcher as the MCP server.

Usage:
    resume-mcp --help
    resume-mcp summary
    resume-mcp search "python"
    resume-mcp --resume my_resume.json show
    resume-mcp tools
    resume-mcp serve --transport sse --port 8787
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.config import Settings, configure_logging
from src.services.dispatcher import Dispatcher
from src.storage.resume_store import ResumeStore
from src.tools.catalog import build_registry
from src.tools.result import ToolResult

app = typer.Typer(
    name="resume-mcp",
    help="Query a structured resume, or serve it to AI assistants over MCP.",
    add_completion=False,
)
console = Console()


class _State:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store = ResumeStore.from_path(settings.resume_path)
        self.dispatcher = Dispatcher(build_registry(self.store))


@app.callback()
def main(
    ctx: typer.Context,
    resume: Optional[str] = typer.Option(
        None, "--resume", "-r",
        help="Path to a resume JSON file. Falls back to RESUME_PATH env var, then the bundled example.",
    ),
):
    """Resume MCP command line."""
    settings = Settings.from_env()
    if resume:
        settings = replace(settings, resume_path=resume)
    configure_logging(settings.log_level)
    ctx.obj = _State(settings)


def _call(ctx: typer.Context, tool_name: str, arguments: dict | None = None) -> ToolResult:
    """Dispatch a tool and exit with status 1 on an error result."""
    result = asyncio.run(ctx.obj.dispatcher.dispatch(tool_name, arguments or {}))
    if result.is_error:
        console.print(f"[red]{escape(result.text_content)}[/]")
        if result.retryable:
            console.print("[yellow]This error is temporary; fix the resume source and retry.[/]")
        raise typer.Exit(1)
    return result


# ── Resume Commands ──────────────────────────────────────────

@app.command()
def show(ctx: typer.Context):
    """Print the complete resume as JSON."""
    result = _call(ctx, "getResume")
    console.print(result.text_content, markup=False, highlight=False)


@app.command()
def summary(ctx: typer.Context):
    """Print a formatted summary of the resume."""
    result = _call(ctx, "getResumeSummary")
    console.print(Panel(result.text_content, title="Resume Summary", expand=False))


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Keyword to find in the resume (case-insensitive)"),
    table: bool = typer.Option(False, "--table", "-t", help="Show results as a table"),
):
    """Search experience, achievements, skills and projects by keyword."""
    result = _call(ctx, "searchResume", {"query": query})
    hits = result.structured_content["hits"]
    if not table or not hits:
        console.print(result.text_content, markup=False, highlight=False)
        return

    results = Table(title=f'🔎 Results for "{escape(query)}"')
    results.add_column("Category", style="bold")
    results.add_column("#", justify="right")
    results.add_column("Match")
    for hit in hits:
        results.add_row(hit["category"], str(hit["index"] or ""), hit["text"])
    console.print(results)


# ── Server Commands ──────────────────────────────────────────

@app.command()
def tools(ctx: typer.Context):
    """List the tools the server exposes."""
    listing = Table(title="📋 Available MCP Tools")
    listing.add_column("Tool", style="bold")
    listing.add_column("Description")
    listing.add_column("Arguments")

    for descriptor in ctx.obj.dispatcher.registry.list_tools():
        properties = descriptor.input_schema.get("properties", {})
        listing.add_row(
            descriptor.name,
            descriptor.description,
            ", ".join(properties) or "none",
        )
    console.print(listing)


@app.command()
def ping(ctx: typer.Context):
    """Check that the tool pipeline responds."""
    console.print(_call(ctx, "ping").text_content)


@app.command()
def serve(
    ctx: typer.Context,
    transport: Optional[str] = typer.Option(None, "--transport", help="stdio, sse or http"),
    host: Optional[str] = typer.Option(None, "--host"),
    port: Optional[int] = typer.Option(None, "--port", "-p"),
):
    """Run the MCP server."""
    from server import run

    settings = ctx.obj.settings
    if transport is not None:
        if transport not in ("stdio", "sse", "http"):
            raise typer.BadParameter("transport must be stdio, sse or http")
        settings = replace(settings, transport=transport)
    if host is not None:
        settings = replace(settings, host=host)
    if port is not None:
        settings = replace(settings, port=port)
    run(settings)


# ── Entry Point ──────────────────────────────────────────────

if __name__ == "__main__":
    app()
