"""``mcpchat serve`` — run the MCP tool server over stdin/stdout."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from mcpchat.cli_commands._output import err_console

if TYPE_CHECKING:
    from mcpchat.config import AppConfig


@click.command()
@click.option("--name", default=None, help="Server name reported in initialize.")
@click.option("--server-version", default=None, help="Server version reported in initialize.")
@click.option("--telemetry", is_flag=True, help="Export tracing spans to stderr.")
@click.pass_obj
def serve(
    config: AppConfig | None,
    name: str | None,
    server_version: str | None,
    telemetry: bool,
) -> None:
    """Serve the built-in tools over newline-delimited JSON-RPC on stdio."""
    from mcpchat.config import AppConfig
    from mcpchat.protocols.errors import TransportError
    from mcpchat.protocols.mcp.server import MCPServer
    from mcpchat.tools import register_builtin_tools

    app_config = config or AppConfig()

    if telemetry or app_config.telemetry.enabled:
        from mcpchat.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(
                service_name=name or app_config.server.name,
                export_to_console=telemetry,
                otlp_endpoint=app_config.telemetry.otlp_endpoint,
            )
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    server = MCPServer(
        name or app_config.server.name,
        server_version or app_config.server.version,
    )
    register_builtin_tools(server.registry)

    try:
        server.serve()
    except TransportError as exc:
        err_console.print(f"[red]Transport error:[/red] {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass
