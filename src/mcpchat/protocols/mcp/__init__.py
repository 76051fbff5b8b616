"""MCP protocol — JSON-RPC models and the line transport.

The server lives in :mod:`mcpchat.protocols.mcp.server`.
"""

from mcpchat.protocols.mcp.models import (
    PROTOCOL_VERSION,
    CallToolParams,
    CallToolResult,
    InitializeResult,
    InputSchema,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    MCPToolDef,
    TextContent,
)
from mcpchat.protocols.mcp.transport import LineTransport, StreamTransport

__all__ = [
    "PROTOCOL_VERSION",
    "CallToolParams",
    "CallToolResult",
    "InitializeResult",
    "InputSchema",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineTransport",
    "ListToolsResult",
    "MCPToolDef",
    "StreamTransport",
    "TextContent",
]
