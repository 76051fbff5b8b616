"""ToolHandler protocol, the common interface for every tool implementation.

Each tool is its own type with a single ``invoke`` operation, so the
:class:`~mcpchat.protocols.registry.ToolRegistry` can dispatch calls without
inspecting what it holds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from mcpchat.protocols.mcp.models import CallToolResult
    from mcpchat.tools.arguments import ToolArguments


@runtime_checkable
class ToolHandler(Protocol):
    """Executes one tool against a loosely-typed argument bag."""

    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        """Run the tool.

        Bad arguments and other tool-level failures are returned as a result
        with ``is_error`` set. Raising is reserved for failures the client
        should see as a JSON-RPC internal error.
        """
        ...


class FunctionTool:
    """Adapts a plain ``(arguments) -> CallToolResult`` callable to :class:`ToolHandler`."""

    def __init__(self, func: Callable[[ToolArguments], CallToolResult]) -> None:
        self._func = func

    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        return self._func(arguments)

    def __repr__(self) -> str:
        return f"FunctionTool({getattr(self._func, '__name__', self._func)!r})"
