from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from FederalRegisterMCP.config.api import ApiConfig, check_api, load_api
from FederalRegisterMCP.config.runtime import RuntimeConfig, check_runtime, load_runtime
from FederalRegisterMCP.config.server import ServerConfig, check_server, load_server
from FederalRegisterMCP.core.constants import BASE_URL

DEFAULT_CONFIG: Mapping[str, Any] = {
    "log": {"level": "INFO", "to_file": False, "dir": "log"},
    "api": {
        "base_url": BASE_URL,
        "timeout": 30.0,
        "user_agent": "federal-register-mcp/1.0",
    },
    "server": {
        "name": "federal-register",
        "version": "1.0.0",
        "host": "127.0.0.1",
        "port": 3000,
        "path": "/mcp",
    },
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    api: ApiConfig
    server: ServerConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    api = load_api(raw)
    server = load_server(raw)

    check_runtime(runtime)
    check_api(api)
    check_server(server)

    return AppConfig(runtime=runtime, api=api, server=server)


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration: built-in defaults, overridden by an optional YAML file.

    Args:
        path: YAML file whose keys override ``DEFAULT_CONFIG``; ``None`` uses
            the defaults alone.

    Returns:
        Validated application configuration.
    """
    if path is None:
        return parse_config_dict(DEFAULT_CONFIG)
    override = parse_yaml(path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(DEFAULT_CONFIG, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
