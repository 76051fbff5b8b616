"""Built-in tools and the argument bag they read from."""

from mcpchat.tools.arguments import ArgumentError, ToolArguments
from mcpchat.tools.builtin import (
    BUILTIN_TOOLS,
    EchoTool,
    GetTimeTool,
    ReadFileTool,
    register_builtin_tools,
)

__all__ = [
    "BUILTIN_TOOLS",
    "ArgumentError",
    "EchoTool",
    "GetTimeTool",
    "ReadFileTool",
    "ToolArguments",
    "register_builtin_tools",
]
