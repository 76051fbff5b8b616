"""``mcpchat tools`` — inspect the tools the server exposes."""

from __future__ import annotations

import click

from mcpchat.cli_commands._output import print_tools_table


@click.group()
def tools() -> None:
    """Inspect built-in tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print descriptors as JSON.")
def list_tools(as_json: bool) -> None:
    """List the built-in tools and their arguments (* = required)."""
    from mcpchat.protocols.registry import ToolRegistry
    from mcpchat.tools import register_builtin_tools

    registry = ToolRegistry()
    register_builtin_tools(registry)
    print_tools_table(registry.list_tools(), as_json=as_json)
