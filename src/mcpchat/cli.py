"""mcpchat CLI entrypoint."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mcpchat import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpchat")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """mcpchat: stdio MCP tool server and chat API clients."""
    from mcpchat.chat.errors import ConfigurationError
    from mcpchat.cli_commands._output import console
    from mcpchat.config import ConfigError, load_config

    try:
        config = load_config(config_path)
    except (ConfigError, ConfigurationError, ValueError) as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)

    setup_logging(log_level or config.log_level)
    ctx.obj = config


def setup_logging(log_level: str = "WARNING") -> None:
    """Send log records to stderr. Stdout is reserved for protocol output."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


# Register subcommands
from mcpchat.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
