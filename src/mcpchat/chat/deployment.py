"""DeploymentChatClient — the deployment-scoped ``getChatResponse`` API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpchat.chat.errors import ChatRequestError, ConfigurationError
from mcpchat.chat.http import JsonHttpClient
from mcpchat.chat.models import ChatMessage, ChatRequest, ChatResponse
from mcpchat.chat.options import apply_options
from mcpchat.utils.telemetry import ATTR_MESSAGE_COUNT, ATTR_MODEL, get_tracer

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from mcpchat.chat.config import ClientConfig
    from mcpchat.chat.options import ChatOption

_tracer = get_tracer(__name__)

CHAT_RESPONSE_PATH = "/api/v0/getChatResponse"


class DeploymentChatClient(JsonHttpClient):
    """Chats with a deployment, authenticated by an ``apiKey`` header.

    Requires an API key, a deployment token and a deployment id. Each request
    carries the token and id in its body.

    Usage::

        client = DeploymentChatClient(ClientConfig.from_env())
        reply = client.get_chat_response(
            [ChatMessage.user("What is 2+2?")],
            with_temperature(0.3),
        )
        for msg in reply.assistant_messages:
            print(msg.text_content)
    """

    def __init__(self, config: ClientConfig, *, http_client: httpx.Client | None = None) -> None:
        missing = [
            label
            for label, value in (
                ("API key", config.api_key),
                ("deployment token", config.deployment_token),
                ("deployment id", config.deployment_id),
            )
            if not value
        ]
        if missing:
            msg = f"{', '.join(missing)} required"
            raise ConfigurationError(msg)

        self._api_key = config.api_key
        self.deployment_token = config.deployment_token
        self.deployment_id = config.deployment_id
        super().__init__(
            config.resolved_base_url,
            config.resolved_timeout,
            http_client=http_client,
        )

    def _auth_headers(self) -> dict[str, str]:
        return {"apiKey": self._api_key}

    def build_request(
        self, messages: Sequence[ChatMessage], *options: ChatOption
    ) -> ChatRequest:
        """Fill in credentials and messages, then apply *options* in order."""
        request = ChatRequest(
            deployment_token=self.deployment_token,
            deployment_id=self.deployment_id,
            messages=list(messages),
        )
        return apply_options(request, options)

    def get_chat_response(
        self, messages: Sequence[ChatMessage], *options: ChatOption
    ) -> ChatResponse:
        """Send the conversation and return the deployment's reply.

        Raises:
            ChatRequestError: If *messages* is empty. Nothing is sent.
            ChatConnectionError, APIStatusError, ResponseDecodeError: On failure.
        """
        if not messages:
            msg = "at least one message is required"
            raise ChatRequestError(msg)

        request = self.build_request(messages, *options)

        with _tracer.start_as_current_span("chat.request") as span:
            span.set_attribute(ATTR_MESSAGE_COUNT, len(request.messages))
            if request.llm_name:
                span.set_attribute(ATTR_MODEL, request.llm_name)
            return self._post_json(CHAT_RESPONSE_PATH, request, ChatResponse, span=span)
