"""Transport bindings: stdio (local pipes) and Streamable HTTP (remote)."""

from __future__ import annotations

import uvicorn
from fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from FederalRegisterMCP.server.sessions import SessionRegistry, SessionTrackingMiddleware
from FederalRegisterMCP.utils.log import log

HEALTH_PATH = "/health"


def run_stdio(server: FastMCP) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    log.info("Starting in stdio mode")
    server.run(transport="stdio")


def build_http_app(server: FastMCP, registry: SessionRegistry, *, path: str = "/mcp") -> Starlette:
    """Build the Streamable HTTP ASGI app with session tracking and health check.

    Routes:
        ``POST/GET/DELETE {path}``: MCP endpoint (session lifecycle by the SDK).
        ``GET /health``: liveness with the active session count.

    Args:
        server: MCP server with tools registered.
        registry: Session registry shared with the health endpoint.
        path: Mount path of the MCP endpoint.

    Returns:
        Starlette application ready for an ASGI server.
    """

    @server.custom_route(HEALTH_PATH, methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        del request
        return JSONResponse({"status": "ok", "mode": "http", "sessions": registry.active_count})

    return server.http_app(
        path=path,
        middleware=[Middleware(SessionTrackingMiddleware, registry=registry, path=path)],
        transport="http",
    )


def run_http(
    server: FastMCP,
    registry: SessionRegistry,
    *,
    host: str,
    port: int,
    path: str = "/mcp",
    log_level: str = "INFO",
) -> None:
    """Serve MCP over Streamable HTTP until interrupted.

    Every session still open at shutdown is dropped from the registry.
    """
    app = build_http_app(server, registry, path=path)

    log.info("Federal Register MCP Server (HTTP mode)")
    log.info("Listening on http://%s:%d", host, port)
    log.info("MCP endpoint: http://%s:%d%s", host, port, path)
    try:
        uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
    finally:
        closed = registry.close_all()
        log.info("Shutting down - dropped %d open session(s)", closed)
