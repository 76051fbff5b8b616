"""Shared error types for the protocol layer.

:class:`RpcError` subclasses map one-to-one onto JSON-RPC 2.0 error
envelopes. Tool-level failures (bad arguments, unreadable files) are *not*
errors here; handlers report those as results with ``isError`` set.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcpchat.protocols.mcp.models import JsonRpcError


class JsonRpcErrorCode(IntEnum):
    """Reserved JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class RpcError(ProtocolError):
    """A failure that is reported to the client as a JSON-RPC error."""

    code: JsonRpcErrorCode = JsonRpcErrorCode.INTERNAL_ERROR
    message: str = "Internal error"

    def __init__(self, data: Any = None) -> None:
        self.data = data
        text = self.message + (f": {data}" if data is not None else "")
        super().__init__(text)

    def to_error(self) -> JsonRpcError:
        """Build the wire-level error object."""
        from mcpchat.protocols.mcp.models import JsonRpcError

        return JsonRpcError(code=int(self.code), message=self.message, data=self.data)


class ParseError(RpcError):
    """The incoming line is not valid JSON."""

    code = JsonRpcErrorCode.PARSE_ERROR
    message = "Parse error"


class InvalidRequestError(RpcError):
    """The JSON is valid but is not a request object."""

    code = JsonRpcErrorCode.INVALID_REQUEST
    message = "Invalid Request"


class MethodNotFoundError(RpcError):
    """The method is not one the server understands."""

    code = JsonRpcErrorCode.METHOD_NOT_FOUND
    message = "Method not found"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown method: {method}")


class InvalidParamsError(RpcError):
    """The params do not have the shape the method needs."""

    code = JsonRpcErrorCode.INVALID_PARAMS
    message = "Invalid params"


class ToolNotFoundError(RpcError):
    """Requested tool does not exist in the registry."""

    code = JsonRpcErrorCode.INVALID_PARAMS
    message = "Tool not found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' not found")


class ToolExecutionError(RpcError):
    """A tool handler raised instead of returning a result."""

    code = JsonRpcErrorCode.INTERNAL_ERROR
    message = "Tool execution error"

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(detail or f"Tool '{name}' failed")


class TransportError(ProtocolError):
    """The underlying byte stream failed (other than a clean end of input)."""


class RegistryError(ProtocolError):
    """A tool could not be registered."""
