"""CompletionsClient — OpenAI-style chat completions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpchat.chat.config import ClientConfig
from mcpchat.chat.errors import ChatRequestError, ConfigurationError
from mcpchat.chat.http import JsonHttpClient
from mcpchat.chat.models import ChatCompletionRequest, ChatCompletionResponse
from mcpchat.utils.telemetry import (
    ATTR_MESSAGE_COUNT,
    ATTR_MODEL,
    ATTR_TOKENS_COMPLETION,
    ATTR_TOKENS_PROMPT,
    ATTR_TOKENS_TOTAL,
    get_tracer,
)

if TYPE_CHECKING:
    import httpx

_tracer = get_tracer(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"


class CompletionsClient(JsonHttpClient):
    """Sends chat-completion requests authenticated with a bearer token.

    Usage::

        client = CompletionsClient.with_api_key(os.environ["ABACUS_API_KEY"])
        reply = client.create_chat_completion(
            ChatCompletionRequest(model="gpt-4o", messages=[Message.user("Hi")])
        )
        print(reply.text)
    """

    def __init__(self, config: ClientConfig, *, http_client: httpx.Client | None = None) -> None:
        if not config.api_key:
            msg = "API key is required"
            raise ConfigurationError(msg)
        self._api_key = config.api_key
        super().__init__(
            config.resolved_base_url,
            config.resolved_timeout,
            http_client=http_client,
        )

    @classmethod
    def with_api_key(cls, api_key: str) -> CompletionsClient:
        return cls(ClientConfig(api_key=api_key))

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Send *request* and return the parsed completion.

        Raises:
            ChatRequestError: If *request* has no messages. Nothing is sent.
            ChatConnectionError, APIStatusError, ResponseDecodeError: On failure.
        """
        if not request.messages:
            msg = "at least one message is required"
            raise ChatRequestError(msg)

        with _tracer.start_as_current_span("chat.request") as span:
            span.set_attribute(ATTR_MESSAGE_COUNT, len(request.messages))
            if request.model:
                span.set_attribute(ATTR_MODEL, request.model)

            response = self._post_json(
                COMPLETIONS_PATH, request, ChatCompletionResponse, span=span
            )

            span.set_attribute(ATTR_TOKENS_PROMPT, response.usage.prompt_tokens)
            span.set_attribute(ATTR_TOKENS_COMPLETION, response.usage.completion_tokens)
            span.set_attribute(ATTR_TOKENS_TOTAL, response.usage.total_tokens)
            return response
