"""ToolRegistry — maps tool names to descriptors and handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcpchat.protocols.errors import RegistryError, ToolNotFoundError
from mcpchat.protocols.mcp.models import InputSchema, MCPToolDef
from mcpchat.protocols.provider import FunctionTool, ToolHandler

if TYPE_CHECKING:
    from collections.abc import Callable

    from mcpchat.protocols.mcp.models import CallToolResult
    from mcpchat.tools.arguments import ToolArguments


class ToolRegistry:
    """Maintains a name-to-handler map shared by listing and dispatch.

    Entries are added before serving starts and never removed. Once
    :meth:`freeze` has been called the registry is read-only.

    Usage::

        registry = ToolRegistry()
        registry.register("echo", "Echoes back the input text", schema, EchoTool())

        registry.list_tools()            # descriptors, registration order
        registry.get("echo").invoke(args)
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[MCPToolDef, ToolHandler]] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        description: str,
        input_schema: InputSchema | dict[str, Any],
        handler: ToolHandler | Callable[[ToolArguments], CallToolResult],
    ) -> None:
        """Add a tool. Names must be unique."""
        if self._frozen:
            msg = f"Cannot register tool '{name}': registry is frozen"
            raise RegistryError(msg)
        if not name:
            msg = "Tool name must not be empty"
            raise RegistryError(msg)
        if name in self._entries:
            msg = f"Tool '{name}' already registered"
            raise RegistryError(msg)

        if not isinstance(handler, ToolHandler):
            if not callable(handler):
                msg = f"Handler for tool '{name}' is neither a ToolHandler nor callable"
                raise RegistryError(msg)
            handler = FunctionTool(handler)

        schema = (
            input_schema
            if isinstance(input_schema, InputSchema)
            else InputSchema.model_validate(input_schema)
        )
        tool_def = MCPToolDef(name=name, description=description, input_schema=schema)
        self._entries[name] = (tool_def, handler)

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> ToolHandler:
        """Return the handler for *name*."""
        entry = self._entries.get(name)
        if entry is None:
            raise ToolNotFoundError(name)
        return entry[1]

    def list_tools(self) -> list[MCPToolDef]:
        """Return every descriptor in registration order."""
        return [tool_def for tool_def, _ in self._entries.values()]

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
