"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from mcpchat.chat.models import ChatCompletionResponse, ChatResponse
    from mcpchat.protocols.mcp.models import MCPToolDef

console = Console()
# Stdout carries JSON-RPC while serving, so server diagnostics go here.
err_console = Console(stderr=True)


def print_tools_table(tools: list[MCPToolDef], *, as_json: bool = False) -> None:
    """Pretty-print tool descriptors as a table."""
    if as_json:
        data = [t.model_dump(mode="json", by_alias=True) for t in tools]
        console.print_json(json.dumps(data))
        return

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments")

    for tool in tools:
        required = set(tool.input_schema.required)
        args = ", ".join(
            f"{name}*" if name in required else name for name in tool.input_schema.properties
        )
        table.add_row(escape(tool.name), escape(_truncate(tool.description)), args or "-")

    console.print(table)


def print_completion(response: ChatCompletionResponse) -> None:
    """Print a chat-completions reply with its token usage."""
    console.print(f"[bold]Model:[/bold] {response.model or '(unknown)'}")
    if not response.choices:
        console.print("[yellow]No choices returned.[/yellow]")
    for choice in response.choices:
        console.print(f"[bold]Response:[/bold] {escape(choice.message.content)}")
    usage = response.usage
    console.print(
        f"Usage: {usage.prompt_tokens} prompt tokens, "
        f"{usage.completion_tokens} completion tokens, {usage.total_tokens} total tokens"
    )


def print_deployment_reply(response: ChatResponse) -> None:
    """Print the assistant messages of a deployment chat reply."""
    replies = response.assistant_messages
    if not replies:
        console.print("[yellow]No assistant reply.[/yellow]")
    for message in replies:
        console.print(f"[bold]Assistant:[/bold] {escape(message.text_content)}")
    if response.deployment_conversation_id:
        console.print(f"(Conversation ID: {response.deployment_conversation_id})")


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
