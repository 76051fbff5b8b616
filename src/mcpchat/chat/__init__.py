"""Chat API clients for OpenAI-style completions and deployment-scoped chat."""

from mcpchat.chat.completions import COMPLETIONS_PATH, CompletionsClient
from mcpchat.chat.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from mcpchat.chat.deployment import CHAT_RESPONSE_PATH, DeploymentChatClient
from mcpchat.chat.errors import (
    APIStatusError,
    ChatClientError,
    ChatConnectionError,
    ChatRequestError,
    ConfigurationError,
    RequestEncodeError,
    ResponseDecodeError,
)
from mcpchat.chat.models import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    Message,
    ResponseMessage,
    Usage,
)
from mcpchat.chat.options import (
    ChatOption,
    with_chat_config,
    with_llm_name,
    with_num_completion_tokens,
    with_system_message,
    with_temperature,
)

__all__ = [
    "CHAT_RESPONSE_PATH",
    "COMPLETIONS_PATH",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "APIStatusError",
    "ChatClientError",
    "ChatCompletionChunk",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatConnectionError",
    "ChatMessage",
    "ChatOption",
    "ChatRequest",
    "ChatRequestError",
    "ChatResponse",
    "Choice",
    "ClientConfig",
    "CompletionsClient",
    "ConfigurationError",
    "DeploymentChatClient",
    "Message",
    "RequestEncodeError",
    "ResponseDecodeError",
    "ResponseMessage",
    "Usage",
    "with_chat_config",
    "with_llm_name",
    "with_num_completion_tokens",
    "with_system_message",
    "with_temperature",
]
