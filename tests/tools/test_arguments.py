"""Tests for ToolArguments."""

from __future__ import annotations

import pytest

from mcpchat.tools.arguments import ArgumentError, ToolArguments


class TestToolArguments:
    def test_get_str(self) -> None:
        args = ToolArguments({"message": "hi"})
        assert args.get_str("message") == "hi"

    def test_missing_argument(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            ToolArguments().get_str("message")
        assert str(exc_info.value) == "Error: 'message' argument must be a string"
        assert exc_info.value.name == "message"

    @pytest.mark.parametrize("value", [5, None, ["a"], {"a": 1}, True])
    def test_wrong_type(self, value: object) -> None:
        with pytest.raises(ArgumentError, match="'path' argument must be a string"):
            ToolArguments({"path": value}).get_str("path")

    def test_mapping_interface(self) -> None:
        args = ToolArguments({"a": 1, "b": 2})
        assert len(args) == 2
        assert dict(args) == {"a": 1, "b": 2}
        assert args["a"] == 1
        assert "b" in args

    def test_copies_input(self) -> None:
        source = {"a": "x"}
        args = ToolArguments(source)
        source["a"] = "y"
        assert args.get_str("a") == "x"

    def test_argument_error_is_value_error(self) -> None:
        assert issubclass(ArgumentError, ValueError)
