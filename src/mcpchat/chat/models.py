"""Wire models for the two chat API variants.

- OpenAI-style chat completions (``/v1/chat/completions``).
- Deployment-scoped chat (``/api/v0/getChatResponse``).

Field aliases match the upstream JSON byte-for-byte. Optional request
fields are omitted from the body when unset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# OpenAI-style chat completions
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """A single chat message."""

    role: str
    content: str

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role="system", content=text)

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str) -> Message:
        return cls(role="assistant", content=text)


class ChatCompletionRequest(BaseModel):
    """Body of a chat-completions call. Must contain at least one message."""

    model: str | None = None
    messages: list[Message] = []
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    stream: bool | None = None
    stop: list[str] | None = None
    user: str | None = None


class Choice(BaseModel):
    index: int = 0
    message: Message
    finish_reason: str | None = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    """Reply to a chat-completions call."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[Choice] = []
    usage: Usage = Field(default_factory=Usage)

    @property
    def text(self) -> str:
        """Content of the first choice, or ``""`` when there is none."""
        return self.choices[0].message.content if self.choices else ""


class Delta(BaseModel):
    role: str | None = None
    content: str | None = None


class ChunkChoice(BaseModel):
    index: int = 0
    delta: Delta = Field(default_factory=Delta)
    finish_reason: str | None = None


class ChatCompletionChunk(BaseModel):
    """One server-sent event of a streamed completion. Not consumed by the client."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChunkChoice] = []


# ---------------------------------------------------------------------------
# Deployment-scoped chat
# ---------------------------------------------------------------------------


class ChatMessage(BaseModel):
    """A request message: ``is_user`` marks the author."""

    is_user: bool
    text: str

    @classmethod
    def user(cls, text: str) -> ChatMessage:
        return cls(is_user=True, text=text)

    @classmethod
    def assistant(cls, text: str) -> ChatMessage:
        return cls(is_user=False, text=text)


class ChatRequest(BaseModel):
    """Body of a ``getChatResponse`` call."""

    model_config = ConfigDict(populate_by_name=True)

    deployment_token: str = Field(alias="deploymentToken")
    deployment_id: str = Field(alias="deploymentId")
    messages: list[ChatMessage]
    llm_name: str | None = Field(default=None, alias="llmName")
    num_completion_tokens: int | None = Field(default=None, alias="numCompletionTokens")
    system_message: str | None = Field(default=None, alias="systemMessage")
    temperature: float | None = None
    chat_config: dict[str, Any] | None = Field(default=None, alias="chatConfig")


class ResponseMessage(BaseModel):
    """A message returned by ``getChatResponse``.

    ``text`` arrives either as a string or as a list of strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_user: bool = Field(default=False, alias="isUser")
    text: str | list[str] | None = None
    timestamp: str | None = None
    is_useful: bool | None = Field(default=None, alias="isUseful")
    feedback: str | None = None
    doc_ids: list[str] | None = Field(default=None, alias="docIds")
    keyword_arguments: dict[str, str] | None = Field(default=None, alias="keywordArguments")

    @property
    def text_content(self) -> str:
        """The text as a single string; the first element when it is a list."""
        if isinstance(self.text, str):
            return self.text
        if self.text:
            return self.text[0]
        return ""


class ChatResponse(BaseModel):
    """Reply to a ``getChatResponse`` call."""

    model_config = ConfigDict(populate_by_name=True)

    deployment_conversation_id: str = Field(default="", alias="deploymentConversationId")
    messages: list[ResponseMessage] = []
    doc_ids: list[str] | None = Field(default=None, alias="docIds")
    keyword_arguments: dict[str, str] | None = Field(default=None, alias="keywordArguments")

    @property
    def assistant_messages(self) -> list[ResponseMessage]:
        return [m for m in self.messages if not m.is_user]
