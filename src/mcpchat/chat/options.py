"""Request modifiers for :meth:`DeploymentChatClient.get_chat_response`.

Each option sets one optional field on a :class:`ChatRequest`. Options are
applied in the order given, so a later option overwrites an earlier one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from mcpchat.chat.models import ChatRequest

ChatOption = Callable[[ChatRequest], None]


def with_llm_name(name: str) -> ChatOption:
    """Select the model the deployment should use."""

    def _apply(request: ChatRequest) -> None:
        request.llm_name = name

    return _apply


def with_temperature(temperature: float) -> ChatOption:
    """Set the sampling temperature."""

    def _apply(request: ChatRequest) -> None:
        request.temperature = temperature

    return _apply


def with_system_message(message: str) -> ChatOption:
    """Set the system preamble."""

    def _apply(request: ChatRequest) -> None:
        request.system_message = message

    return _apply


def with_num_completion_tokens(tokens: int) -> ChatOption:
    """Cap the number of generated tokens."""

    def _apply(request: ChatRequest) -> None:
        request.num_completion_tokens = tokens

    return _apply


def with_chat_config(config: dict[str, Any]) -> ChatOption:
    """Pass extra deployment-specific chat configuration."""

    def _apply(request: ChatRequest) -> None:
        request.chat_config = dict(config)

    return _apply


def apply_options(request: ChatRequest, options: Iterable[ChatOption]) -> ChatRequest:
    for option in options:
        option(request)
    return request
