"""Tests for ToolRegistry and the ToolHandler adapter."""

from __future__ import annotations

import pytest

from mcpchat.protocols.errors import RegistryError, ToolNotFoundError
from mcpchat.protocols.mcp.models import CallToolResult, InputSchema
from mcpchat.protocols.provider import FunctionTool, ToolHandler
from mcpchat.protocols.registry import ToolRegistry
from mcpchat.tools.arguments import ToolArguments


class _UpperTool:
    def invoke(self, arguments: ToolArguments) -> CallToolResult:
        return CallToolResult.text(arguments.get_str("text").upper())


def _noop(arguments: ToolArguments) -> CallToolResult:
    return CallToolResult.text("ok")


class TestToolHandlerProtocol:
    def test_class_with_invoke_satisfies_protocol(self) -> None:
        assert isinstance(_UpperTool(), ToolHandler)

    def test_function_tool_satisfies_protocol(self) -> None:
        tool = FunctionTool(_noop)
        assert isinstance(tool, ToolHandler)
        assert tool.invoke(ToolArguments()).content[0].text == "ok"
        assert "_noop" in repr(tool)


class TestToolRegistry:
    def test_register_and_get(self) -> None:
        registry = ToolRegistry()
        tool = _UpperTool()
        registry.register("upper", "Uppercases text", InputSchema(), tool)

        assert registry.get("upper") is tool
        assert "upper" in registry
        assert len(registry) == 1

    def test_plain_callable_is_wrapped(self) -> None:
        registry = ToolRegistry()
        registry.register("noop", "Does nothing", {}, _noop)
        assert isinstance(registry.get("noop"), FunctionTool)

    def test_dict_schema_is_validated(self) -> None:
        registry = ToolRegistry()
        registry.register(
            "upper",
            "Uppercases text",
            {"properties": {"text": {"type": "string"}}, "required": ["text"]},
            _UpperTool(),
        )
        schema = registry.list_tools()[0].input_schema
        assert schema.type == "object"
        assert schema.required == ["text"]

    def test_list_preserves_registration_order(self) -> None:
        registry = ToolRegistry()
        for name in ("zeta", "alpha", "mid"):
            registry.register(name, name, {}, _noop)
        assert [t.name for t in registry.list_tools()] == ["zeta", "alpha", "mid"]
        assert registry.names() == ["zeta", "alpha", "mid"]

    def test_unknown_tool_raises(self) -> None:
        with pytest.raises(ToolNotFoundError, match="missing"):
            ToolRegistry().get("missing")

    def test_duplicate_name_rejected(self) -> None:
        registry = ToolRegistry()
        registry.register("echo", "first", {}, _noop)
        with pytest.raises(RegistryError, match="already registered"):
            registry.register("echo", "second", {}, _noop)
        assert registry.list_tools()[0].description == "first"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(RegistryError, match="empty"):
            ToolRegistry().register("", "nameless", {}, _noop)

    def test_non_callable_handler_rejected(self) -> None:
        with pytest.raises(RegistryError, match="neither"):
            ToolRegistry().register("bad", "bad", {}, "not a handler")  # type: ignore[arg-type]

    def test_frozen_registry_is_read_only(self) -> None:
        registry = ToolRegistry()
        registry.register("echo", "Echo", {}, _noop)
        registry.freeze()

        assert registry.frozen is True
        with pytest.raises(RegistryError, match="frozen"):
            registry.register("late", "Late", {}, _noop)
        assert registry.get("echo") is not None
