"""Remote API domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FederalRegisterMCP.config.common import (
    expect_float,
    get_required_value,
    get_section,
    required_str,
)


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Federal Register API endpoint and HTTP settings."""

    base_url: str
    timeout: float
    user_agent: str


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load API configuration from the ``api`` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "api", required=True)
    return ApiConfig(
        base_url=required_str(section, "base_url", "api.base_url").rstrip("/"),
        timeout=expect_float(get_required_value(section, "timeout", "api.timeout"), "api.timeout"),
        user_agent=required_str(section, "user_agent", "api.user_agent"),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API domain constraints.

    Raises:
        ValueError: If values violate API constraints.
    """
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("api.base_url must be an http(s) URL")
    if config.timeout <= 0:
        raise ValueError("api.timeout must be positive")
    if not config.user_agent.strip():
        raise ValueError("api.user_agent must not be empty")
