"""
Landing page — a small HTML index served at `/` on network transports.
"""

from __future__ import annotations

from html import escape

from src.tools.registry import ToolRegistry

_STYLE = """
    body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
    .header { background: #f0f8ff; padding: 20px; border-radius: 8px; margin-bottom: 20px; }
    .tools { background: #f9f9f9; padding: 15px; border-radius: 5px; margin-bottom: 15px; }
    .endpoint { background: #e8f5e8; padding: 10px; border-radius: 5px; font-family: monospace; }
"""

_ENDPOINT_PATHS = {"sse": "/sse", "http": "/mcp"}


def render_landing_page(
    registry: ToolRegistry,
    server_name: str,
    server_url: str,
    transport: str = "sse",
) -> str:
    """Render the landing page listing every registered tool and the connection URL."""
    tool_items = "\n".join(
        f"            <li><strong>{escape(tool.name)}</strong> - {escape(tool.description)}</li>"
        for tool in registry.list_tools()
    )
    endpoint = f"{server_url.rstrip('/')}{_ENDPOINT_PATHS.get(transport, '/sse')}"

    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{escape(server_name)}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="header">
        <h1>🔗 {escape(server_name)}</h1>
        <p>Model Context Protocol server for accessing resume data</p>
    </div>
    <div class="tools">
        <h2>📋 Available MCP Tools</h2>
        <ul>
{tool_items}
        </ul>
    </div>
    <div class="endpoint">
        <h3>🔌 MCP Connection Endpoint</h3>
        <code>{escape(endpoint)}</code>
    </div>
    <p><strong>Status:</strong> ✅ Server is running!</p>
</body>
</html>
"""
