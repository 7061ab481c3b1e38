"""MCP server domain configuration (identity and HTTP binding)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FederalRegisterMCP.config.common import (
    expect_int,
    get_required_value,
    get_section,
    required_str,
)


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server identity advertised over MCP and HTTP listen settings."""

    name: str
    version: str
    host: str
    port: int
    path: str


def load_server(raw: Mapping[str, Any]) -> ServerConfig:
    """Load server configuration from the ``server`` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "server", required=True)
    return ServerConfig(
        name=required_str(section, "name", "server.name"),
        version=required_str(section, "version", "server.version"),
        host=required_str(section, "host", "server.host"),
        port=expect_int(get_required_value(section, "port", "server.port"), "server.port"),
        path=required_str(section, "path", "server.path"),
    )


def check_server(config: ServerConfig) -> None:
    """Validate server domain constraints.

    Raises:
        ValueError: If values violate server constraints.
    """
    if not config.name.strip():
        raise ValueError("server.name must not be empty")
    if not 0 < config.port < 65536:
        raise ValueError("server.port must be between 1 and 65535")
    if not config.path.startswith("/"):
        raise ValueError("server.path must start with '/'")
    if config.path.rstrip("/") in ("", "/health"):
        raise ValueError("server.path must not shadow '/' or '/health'")
