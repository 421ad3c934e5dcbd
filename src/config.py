"""
Configuration — environment-driven settings for the Resume MCP server.

Values are read from the process environment, with a `.env` file in the
working directory loaded first.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_VALID_TRANSPORTS = ("stdio", "sse", "http")


@dataclass(frozen=True)
class Settings:
    """Immutable server settings."""

    resume_path: str | None = None
    server_name: str = "Resume Server"
    server_version: str = "1.0.0"
    server_url: str = "http://localhost:8787"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8787
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        port_raw = os.getenv("PORT", "8787")
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}")

        transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
        if transport not in _VALID_TRANSPORTS:
            raise ValueError(
                f"MCP_TRANSPORT must be one of {', '.join(_VALID_TRANSPORTS)}, got {transport!r}"
            )

        origins = tuple(
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        )

        return cls(
            resume_path=os.getenv("RESUME_PATH") or None,
            server_name=os.getenv("SERVER_NAME", "Resume Server"),
            server_url=os.getenv("SERVER_URL", "http://localhost:8787").rstrip("/"),
            transport=transport,
            host=os.getenv("HOST", "127.0.0.1"),
            port=port,
            cors_origins=origins or ("*",),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Send log output to stderr so the stdio transport stays clean."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
