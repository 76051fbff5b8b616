"""Error types for the chat API clients.

Construction and request validation fail before any I/O. Network,
status and decode failures are raised as distinct types so callers can
tell them apart. Nothing is retried.
"""

from __future__ import annotations


class ChatClientError(Exception):
    """Base error for all chat client failures."""


class ConfigurationError(ChatClientError):
    """A required credential or setting is missing."""


class ChatRequestError(ChatClientError):
    """The request is invalid and was not sent."""


class RequestEncodeError(ChatClientError):
    """The request body could not be serialised to JSON."""


class ChatConnectionError(ChatClientError):
    """The HTTP call failed at the network level or timed out."""


class APIStatusError(ChatClientError):
    """The API answered with a status outside ``[200, 300)``."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class ResponseDecodeError(ChatClientError):
    """The response body is not JSON or does not match the expected shape."""
