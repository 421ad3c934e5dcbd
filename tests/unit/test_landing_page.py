"""Unit tests for the HTML landing page."""

import pytest

from src.services.landing_page import render_landing_page
from src.tools.registry import NoArguments, ToolDescriptor, ToolRegistry


async def _echo(args):
    return ""


@pytest.mark.unit
def test_lists_registered_tools(registry):
    html = render_landing_page(registry, "Resume Server", "https://resume.example.com")

    for tool in registry.list_tools():
        assert f"<strong>{tool.name}</strong> - {tool.description}" in html
    assert "<code>https://resume.example.com/sse</code>" in html
    assert "Server is running" in html


@pytest.mark.unit
def test_http_transport_endpoint(registry):
    html = render_landing_page(registry, "Resume Server", "http://localhost:8787/", transport="http")
    assert "<code>http://localhost:8787/mcp</code>" in html


@pytest.mark.unit
def test_escapes_html():
    registry = ToolRegistry()
    registry.register(ToolDescriptor("x", "<b>bold</b>", NoArguments, _echo))

    html = render_landing_page(registry, "A & B", "http://localhost")

    assert "&lt;b&gt;bold&lt;/b&gt;" in html
    assert "<title>A &amp; B</title>" in html
