from __future__ import annotations

"""Public configuration API for FederalRegisterMCP."""

from FederalRegisterMCP.config.api import ApiConfig
from FederalRegisterMCP.config.app import (
    DEFAULT_CONFIG,
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
)
from FederalRegisterMCP.config.runtime import RuntimeConfig
from FederalRegisterMCP.config.server import ServerConfig

__all__ = [
    "RuntimeConfig",
    "ApiConfig",
    "ServerConfig",
    "AppConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "merge_config_dicts",
    "parse_config_dict",
]
