"""Built-in tools: echo, get_time, read_file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from mcpchat.protocols.mcp.models import CallToolResult, InputSchema
from mcpchat.tools.arguments import ArgumentError, ToolArguments

if TYPE_CHECKING:
    from mcpchat.protocols.registry import ToolRegistry

logger = logging.getLogger(__name__)

TIME_PREFIX = "Current server time: "
READ_ERROR_PREFIX = "Error reading file: "


class EchoTool:
    """Echoes back the ``message`` argument."""

    name: ClassVar[str] = "echo"
    description: ClassVar[str] = "Echoes back the input text"
    input_schema: ClassVar[InputSchema] = InputSchema(
        properties={
            "message": {"type": "string", "description": "The message to echo back"},
        },
        required=["message"],
    )

    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        try:
            message = arguments.get_str("message")
        except ArgumentError as exc:
            return CallToolResult.error(str(exc))
        return CallToolResult.text(f"Echo: {message}")


class GetTimeTool:
    """Reports the current wall-clock time as an RFC 3339 timestamp."""

    name: ClassVar[str] = "get_time"
    description: ClassVar[str] = "Returns the current server time"
    input_schema: ClassVar[InputSchema] = InputSchema()

    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        now = datetime.now().astimezone()
        return CallToolResult.text(TIME_PREFIX + now.isoformat(timespec="seconds"))


class ReadFileTool:
    """Returns the full content of the file at ``path``.

    There is no size limit. Bytes that are not valid UTF-8 are replaced.
    """

    name: ClassVar[str] = "read_file"
    description: ClassVar[str] = "Reads the content of a file"
    input_schema: ClassVar[InputSchema] = InputSchema(
        properties={
            "path": {"type": "string", "description": "The path to the file to read"},
        },
        required=["path"],
    )

    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        try:
            path = arguments.get_str("path")
        except ArgumentError as exc:
            return CallToolResult.error(str(exc))

        try:
            data = Path(path).read_bytes()
        except (OSError, ValueError) as exc:
            logger.debug("read_file failed for %s: %s", path, exc)
            return CallToolResult.error(f"{READ_ERROR_PREFIX}{exc}")
        return CallToolResult.text(data.decode("utf-8", errors="replace"))


BUILTIN_TOOLS: tuple[type[EchoTool] | type[GetTimeTool] | type[ReadFileTool], ...] = (
    EchoTool,
    GetTimeTool,
    ReadFileTool,
)


def register_builtin_tools(registry: ToolRegistry) -> None:
    """Register every built-in tool on *registry*."""
    for tool_cls in BUILTIN_TOOLS:
        registry.register(tool_cls.name, tool_cls.description, tool_cls.input_schema, tool_cls())
