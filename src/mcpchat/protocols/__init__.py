"""Protocol layer — JSON-RPC errors, the tool registry, and MCP."""

from mcpchat.protocols.errors import (
    InvalidParamsError,
    InvalidRequestError,
    JsonRpcErrorCode,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    RegistryError,
    RpcError,
    ToolExecutionError,
    ToolNotFoundError,
    TransportError,
)
from mcpchat.protocols.provider import FunctionTool, ToolHandler
from mcpchat.protocols.registry import ToolRegistry

__all__ = [
    "FunctionTool",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcErrorCode",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolError",
    "RegistryError",
    "RpcError",
    "ToolExecutionError",
    "ToolHandler",
    "ToolNotFoundError",
    "ToolRegistry",
    "TransportError",
]
