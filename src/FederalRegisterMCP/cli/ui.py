"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from FederalRegisterMCP.cli.runner import CommandRunner
from FederalRegisterMCP.config import load_config


@click.group(
    help="Federal Register MCP server: expose the Federal Register API as MCP tools.",
    invoke_without_command=True,
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    envvar="FEDERAL_REGISTER_MCP_CONFIG",
    help="YAML file overriding the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    Without a subcommand the server starts in stdio mode.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    load_dotenv()

    ctx.obj = load_config(config_path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve_cmd)


@cli.command("serve")
@click.option("--http", "use_http", is_flag=True, help="Serve Streamable HTTP instead of stdio.")
@click.option("--host", default=None, help="HTTP bind host (default: server.host).")
@click.option(
    "--port",
    type=int,
    default=None,
    envvar="MCP_PORT",
    show_envvar=True,
    help="HTTP port (default: server.port).",
)
@click.pass_context
def serve_cmd(ctx: click.Context, use_http: bool, host: str | None, port: int | None) -> None:
    """Run the MCP server over stdio (default) or HTTP.

    Args:
        ctx: Click context.
        use_http: Whether to use the HTTP transport.
        host: HTTP bind host override.
        port: HTTP port override.

    Raises:
        click.Abort: When the server fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_serve(action=ctx.command.name, use_http=use_http, host=host, port=port)
