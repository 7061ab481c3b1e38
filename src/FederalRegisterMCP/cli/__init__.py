"""CLI package for FederalRegisterMCP.

Wires the click command group to the command runner that starts the MCP
server on the chosen transport.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from FederalRegisterMCP.cli.runner import CommandRunner
from FederalRegisterMCP.cli.ui import cli


def main() -> None:
    """Run FederalRegisterMCP CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
