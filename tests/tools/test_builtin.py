"""Tests for the built-in echo, get_time and read_file tools."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from mcpchat.protocols.provider import ToolHandler
from mcpchat.protocols.registry import ToolRegistry
from mcpchat.tools.arguments import ToolArguments
from mcpchat.tools.builtin import (
    BUILTIN_TOOLS,
    READ_ERROR_PREFIX,
    TIME_PREFIX,
    EchoTool,
    GetTimeTool,
    ReadFileTool,
    register_builtin_tools,
)


class TestEchoTool:
    def test_echo(self) -> None:
        result = EchoTool().invoke(ToolArguments({"message": "hello"}))
        assert result.is_error is False
        assert result.content[0].text == "Echo: hello"

    def test_extra_arguments_ignored(self) -> None:
        result = EchoTool().invoke(ToolArguments({"message": "x", "other": 1}))
        assert result.content[0].text == "Echo: x"

    def test_missing_message(self) -> None:
        result = EchoTool().invoke(ToolArguments())
        assert result.is_error is True
        assert result.content[0].text == "Error: 'message' argument must be a string"

    def test_non_string_message(self) -> None:
        result = EchoTool().invoke(ToolArguments({"message": 5}))
        assert result.is_error is True


class TestGetTimeTool:
    def test_returns_current_time(self) -> None:
        before = datetime.now().astimezone().replace(microsecond=0)
        result = GetTimeTool().invoke(ToolArguments())
        after = datetime.now().astimezone()

        text = result.content[0].text
        assert text.startswith(TIME_PREFIX)
        stamp = datetime.fromisoformat(text[len(TIME_PREFIX) :])
        assert stamp.tzinfo is not None
        assert before <= stamp <= after

    def test_ignores_arguments(self) -> None:
        result = GetTimeTool().invoke(ToolArguments({"zone": "UTC"}))
        assert result.is_error is False


class TestReadFileTool:
    def test_reads_file(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        target.write_text("ABC", encoding="utf-8")
        result = ReadFileTool().invoke(ToolArguments({"path": str(target)}))
        assert result.is_error is False
        assert result.content[0].text == "ABC"

    def test_reads_empty_file(self, tmp_path: Path) -> None:
        target = tmp_path / "empty.txt"
        target.write_bytes(b"")
        result = ReadFileTool().invoke(ToolArguments({"path": str(target)}))
        assert result.is_error is False
        assert result.content[0].text == ""

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        target = tmp_path / "bin.dat"
        target.write_bytes(b"ok\xff")
        result = ReadFileTool().invoke(ToolArguments({"path": str(target)}))
        assert result.content[0].text == "ok�"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = ReadFileTool().invoke(ToolArguments({"path": str(tmp_path / "missing")}))
        assert result.is_error is True
        assert result.content[0].text.startswith(READ_ERROR_PREFIX)

    def test_directory_is_failure(self, tmp_path: Path) -> None:
        result = ReadFileTool().invoke(ToolArguments({"path": str(tmp_path)}))
        assert result.is_error is True
        assert result.content[0].text.startswith(READ_ERROR_PREFIX)

    def test_embedded_null_byte_is_failure(self) -> None:
        result = ReadFileTool().invoke(ToolArguments({"path": "a\x00b"}))
        assert result.is_error is True
        assert result.content[0].text.startswith(READ_ERROR_PREFIX)

    def test_missing_path_argument(self) -> None:
        result = ReadFileTool().invoke(ToolArguments())
        assert result.is_error is True
        assert result.content[0].text == "Error: 'path' argument must be a string"


class TestRegisterBuiltinTools:
    def test_registers_all(self) -> None:
        registry = ToolRegistry()
        register_builtin_tools(registry)
        assert registry.names() == ["echo", "get_time", "read_file"]
        assert all(isinstance(registry.get(name), ToolHandler) for name in registry.names())

    def test_descriptions(self) -> None:
        assert [tool.description for tool in BUILTIN_TOOLS] == [
            "Echoes back the input text",
            "Returns the current server time",
            "Reads the content of a file",
        ]
