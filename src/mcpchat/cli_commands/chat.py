"""``mcpchat chat`` — send a single message through one of the chat clients.

Credentials come from the config file or ``ABACUS_*`` environment variables.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from mcpchat.cli_commands._output import console, print_completion, print_deployment_reply

if TYPE_CHECKING:
    from mcpchat.chat.config import ClientConfig
    from mcpchat.config import AppConfig


@click.group()
def chat() -> None:
    """Talk to the chat API."""


@chat.command("complete")
@click.argument("message")
@click.option("--model", "-m", default="gpt-4o", show_default=True, help="Model name.")
@click.option("--system", "-s", default=None, help="System message sent first.")
@click.option("--temperature", "-t", type=float, default=None, help="Sampling temperature.")
@click.option("--max-tokens", type=int, default=None, help="Completion token cap.")
@click.pass_obj
def complete(
    config: AppConfig | None,
    message: str,
    model: str,
    system: str | None,
    temperature: float | None,
    max_tokens: int | None,
) -> None:
    """Send MESSAGE to the OpenAI-style chat-completions endpoint."""
    from mcpchat.chat.completions import CompletionsClient
    from mcpchat.chat.errors import ChatClientError
    from mcpchat.chat.models import ChatCompletionRequest, Message

    messages = [Message.system(system)] if system else []
    messages.append(Message.user(message))
    request = ChatCompletionRequest(
        model=model,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
    )

    try:
        with CompletionsClient(_client_config(config)) as client:
            response = client.create_chat_completion(request)
    except ChatClientError as exc:
        console.print(f"[red]Chat error:[/red] {exc}")
        sys.exit(1)

    print_completion(response)


@chat.command("deployment")
@click.argument("message")
@click.option("--llm-name", default=None, help="Model the deployment should use.")
@click.option("--system", "-s", default=None, help="System message.")
@click.option("--temperature", "-t", type=float, default=None, help="Sampling temperature.")
@click.option("--max-tokens", type=int, default=None, help="Completion token cap.")
@click.pass_obj
def deployment(
    config: AppConfig | None,
    message: str,
    llm_name: str | None,
    system: str | None,
    temperature: float | None,
    max_tokens: int | None,
) -> None:
    """Send MESSAGE to the deployment-scoped chat endpoint."""
    from mcpchat.chat.deployment import DeploymentChatClient
    from mcpchat.chat.errors import ChatClientError
    from mcpchat.chat.models import ChatMessage
    from mcpchat.chat.options import (
        ChatOption,
        with_llm_name,
        with_num_completion_tokens,
        with_system_message,
        with_temperature,
    )

    options: list[ChatOption] = []
    if llm_name:
        options.append(with_llm_name(llm_name))
    if temperature is not None:
        options.append(with_temperature(temperature))
    if max_tokens is not None:
        options.append(with_num_completion_tokens(max_tokens))
    if system:
        options.append(with_system_message(system))

    try:
        with DeploymentChatClient(_client_config(config)) as client:
            response = client.get_chat_response([ChatMessage.user(message)], *options)
    except ChatClientError as exc:
        console.print(f"[red]Chat error:[/red] {exc}")
        sys.exit(1)

    print_deployment_reply(response)


def _client_config(config: AppConfig | None) -> ClientConfig:
    if config is not None:
        return config.chat

    from mcpchat.chat.config import ClientConfig

    return ClientConfig.from_env()
