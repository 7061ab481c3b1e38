"""Service layer for FederalRegisterMCP.

Provides the Federal Register service, the result paginator and a factory
building the service from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from FederalRegisterMCP.services.documents import FederalRegisterClient, FederalRegisterService
from FederalRegisterMCP.services.pagination import collect_all_results

if TYPE_CHECKING:
    from FederalRegisterMCP.config import AppConfig


def create_service(config: AppConfig) -> FederalRegisterService:
    """Create a Federal Register service with an HTTP client from config.

    Args:
        config: Application configuration containing API settings.

    Returns:
        Configured FederalRegisterService instance.
    """
    from FederalRegisterMCP.sources.federal_register.client import FederalRegisterApiClient

    client = FederalRegisterApiClient(
        base_url=config.api.base_url,
        timeout=config.api.timeout,
        user_agent=config.api.user_agent,
    )
    return FederalRegisterService(client=client)


__all__ = [
    "FederalRegisterClient",
    "FederalRegisterService",
    "collect_all_results",
    "create_service",
]
