"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from FederalRegisterMCP.config import AppConfig
from FederalRegisterMCP.server import SessionRegistry, create_server, run_http, run_stdio
from FederalRegisterMCP.services import FederalRegisterService, create_service
from FederalRegisterMCP.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, transport selection
    and error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_serve(
        self,
        action: str,
        *,
        use_http: bool = False,
        host: str | None = None,
        port: int | None = None,
    ) -> None:
        """Run the MCP server on the selected transport until it stops.

        Args:
            action: The CLI command name (e.g., 'serve').
            use_http: Serve Streamable HTTP instead of stdio.
            host: HTTP bind host; defaults to ``server.host``.
            port: HTTP port; defaults to ``server.port``.

        Raises:
            click.Abort: When the server fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        server_cfg = self.config.server
        service: FederalRegisterService | None = None
        try:
            service = create_service(self.config)
            server = create_server(service, name=server_cfg.name, version=server_cfg.version)

            if use_http:
                run_http(
                    server,
                    SessionRegistry(),
                    host=host or server_cfg.host,
                    port=port or server_cfg.port,
                    path=server_cfg.path,
                    log_level=self.config.runtime.level,
                )
            else:
                run_stdio(server)
        except KeyboardInterrupt:
            log.info("Interrupted; shutting down")
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Server failed: %s", e)
            raise click.Abort from e
        finally:
            if service is not None:
                service.close()
