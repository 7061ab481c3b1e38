"""MCP server package: tool registration and transport bindings."""

from __future__ import annotations

from FederalRegisterMCP.server.sessions import SessionRegistry, SessionTrackingMiddleware
from FederalRegisterMCP.server.tools import create_server
from FederalRegisterMCP.server.transport import build_http_app, run_http, run_stdio

__all__ = [
    "SessionRegistry",
    "SessionTrackingMiddleware",
    "build_http_app",
    "create_server",
    "run_http",
    "run_stdio",
]
