"""MCPServer — a blocking JSON-RPC 2.0 loop exposing registered tools.

Reads one request per line from a :class:`LineTransport`, routes it by
method name, and writes one response per line. Requests are handled one at
a time, to completion, in arrival order.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mcpchat.protocols.errors import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    RpcError,
    ToolExecutionError,
)
from mcpchat.protocols.mcp.models import (
    CallToolParams,
    CallToolResult,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    ServerInfo,
)
from mcpchat.protocols.mcp.transport import LineTransport, StreamTransport
from mcpchat.protocols.registry import ToolRegistry
from mcpchat.tools.arguments import ToolArguments
from mcpchat.utils.telemetry import ATTR_TOOL_IS_ERROR, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Callable

    from mcpchat.protocols.mcp.models import InputSchema
    from mcpchat.protocols.provider import ToolHandler

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class Method(str, Enum):
    """Request kinds the server understands."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    INITIALIZED = "notifications/initialized"


class MCPServer:
    """Serves the tools in a :class:`ToolRegistry` over a line transport.

    Usage::

        server = MCPServer("mcpchat-server", "1.0.0")
        register_builtin_tools(server.registry)
        server.serve()                # stdin/stdout until end of input
    """

    def __init__(
        self,
        name: str,
        version: str,
        registry: ToolRegistry | None = None,
    ) -> None:
        self.name = name
        self.version = version
        self.registry = registry if registry is not None else ToolRegistry()
        self._handlers: dict[Method, Callable[[JsonRpcRequest], Any]] = {
            Method.INITIALIZE: self._handle_initialize,
            Method.TOOLS_LIST: self._handle_list_tools,
            Method.TOOLS_CALL: self._handle_call_tool,
            Method.INITIALIZED: self._handle_initialized,
        }

    def register_tool(
        self,
        name: str,
        description: str,
        input_schema: InputSchema | dict[str, Any],
        handler: ToolHandler | Callable[[ToolArguments], CallToolResult],
    ) -> None:
        """Register a tool. Only allowed before :meth:`serve` starts."""
        self.registry.register(name, description, input_schema, handler)

    # ------------------------------------------------------------------ loop
    def serve(self, transport: LineTransport | None = None) -> None:
        """Run the read-dispatch-write loop until the input ends.

        Raises:
            TransportError: If reading from or writing to the stream fails.
        """
        transport = transport or StreamTransport.stdio()
        self.registry.freeze()
        logger.info(
            "Starting MCP server: %s v%s (%d tools)", self.name, self.version, len(self.registry)
        )
        try:
            while True:
                line = transport.read_line()
                if line is None:
                    logger.info("End of input, shutting down")
                    return
                response = self.handle_line(line)
                if response is not None:
                    transport.write_message(response)
        finally:
            transport.close()

    def handle_line(self, line: str) -> dict[str, Any] | None:
        """Decode one line and return the wire response, if one is due."""
        if not line.strip():
            return None

        try:
            raw = json.loads(line)
        except (ValueError, RecursionError) as exc:
            logger.warning("Parse error: %s", exc)
            return JsonRpcResponse.failure(None, ParseError(str(exc)).to_error()).to_wire()

        if not isinstance(raw, dict):
            error = InvalidRequestError("request must be a JSON object")
            return JsonRpcResponse.failure(None, error.to_error()).to_wire()

        try:
            request = JsonRpcRequest.model_validate(raw)
        except ValidationError as exc:
            if "id" not in raw:
                logger.warning("Dropping invalid notification: %s", exc)
                return None
            request_id = raw["id"]
            if not isinstance(request_id, (int, str)) or isinstance(request_id, bool):
                request_id = None
            error = InvalidRequestError(_summarize_validation(exc))
            return JsonRpcResponse.failure(request_id, error.to_error()).to_wire()

        response = self.handle_request(request)
        return response.to_wire() if response is not None else None

    def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Dispatch *request*. Returns ``None`` for notifications."""
        try:
            try:
                method = Method(request.method)
            except ValueError:
                raise MethodNotFoundError(request.method) from None
            result = self._handlers[method](request)
        except RpcError as exc:
            if request.is_notification:
                logger.warning("Notification %s failed: %s", request.method, exc)
                return None
            return JsonRpcResponse.failure(request.id, exc.to_error())

        if request.is_notification:
            return None
        return JsonRpcResponse.success(request.id, result)

    # -------------------------------------------------------------- handlers
    def _handle_initialize(self, request: JsonRpcRequest) -> InitializeResult:
        return InitializeResult(server_info=ServerInfo(name=self.name, version=self.version))

    def _handle_list_tools(self, request: JsonRpcRequest) -> ListToolsResult:
        return ListToolsResult(tools=self.registry.list_tools())

    def _handle_call_tool(self, request: JsonRpcRequest) -> CallToolResult:
        if not isinstance(request.params, dict):
            msg = "tools/call params must be an object"
            raise InvalidParamsError(msg)
        try:
            params = CallToolParams.model_validate(request.params)
        except ValidationError as exc:
            raise InvalidParamsError(_summarize_validation(exc)) from exc

        handler = self.registry.get(params.name)

        with _tracer.start_as_current_span("mcp.tools.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, params.name)
            try:
                result = handler.invoke(ToolArguments(params.arguments))
                if not isinstance(result, CallToolResult):
                    msg = f"returned {type(result).__name__}, expected CallToolResult"
                    raise TypeError(msg)
            except Exception as exc:
                logger.exception("Tool %s raised", params.name)
                raise ToolExecutionError(params.name, str(exc)) from exc
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)

        if result.is_error:
            logger.info("Tool %s reported a failure", params.name)
        return result

    def _handle_initialized(self, request: JsonRpcRequest) -> dict[str, Any]:
        logger.info("Client initialized")
        return {}


def _summarize_validation(exc: ValidationError) -> str:
    """Flatten a pydantic error into ``loc: msg`` pairs."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "request"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
