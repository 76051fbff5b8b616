"""Tests for ``mcpchat serve``."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import patch

from click.testing import CliRunner

from mcpchat.cli import main


def _responses(output: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def _lines(*messages: dict[str, Any]) -> str:
    return "".join(json.dumps(m) + "\n" for m in messages)


class TestServe:
    def test_session_over_stdio(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve"],
            input=_lines(
                {"jsonrpc": "2.0", "id": 1, "method": "initialize"},
                {"jsonrpc": "2.0", "method": "notifications/initialized"},
                {
                    "jsonrpc": "2.0",
                    "id": 2,
                    "method": "tools/call",
                    "params": {"name": "echo", "arguments": {"message": "hi"}},
                },
            ),
        )

        assert result.exit_code == 0
        responses = _responses(result.output)
        assert [r["id"] for r in responses] == [1, 2]
        assert responses[0]["result"]["serverInfo"] == {
            "name": "mcpchat-server",
            "version": "1.0.0",
        }
        assert responses[1]["result"]["content"][0]["text"] == "Echo: hi"

    def test_name_and_version_overrides(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["serve", "--name", "custom", "--server-version", "9.9.9"],
            input=_lines({"jsonrpc": "2.0", "id": 1, "method": "initialize"}),
        )

        assert result.exit_code == 0
        info = _responses(result.output)[0]["result"]["serverInfo"]
        assert info == {"name": "custom", "version": "9.9.9"}

    def test_config_file_identity(self, tmp_path: Any) -> None:
        config = tmp_path / "mcpchat.yaml"
        config.write_text("server:\n  name: from-file\n  version: 3.0.0\n")
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--config", str(config), "serve"],
            input=_lines({"jsonrpc": "2.0", "id": 1, "method": "initialize"}),
        )

        assert result.exit_code == 0
        info = _responses(result.output)[0]["result"]["serverInfo"]
        assert info == {"name": "from-file", "version": "3.0.0"}

    def test_empty_input_exits_cleanly(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve"], input="")
        assert result.exit_code == 0
        assert _responses(result.output) == []

    def test_telemetry_without_sdk_fails(self) -> None:
        with patch(
            "mcpchat.utils.telemetry.configure_telemetry",
            side_effect=ImportError("opentelemetry-sdk is required"),
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "--telemetry"], input="")

        assert result.exit_code == 1

    def test_bad_config_file(self, tmp_path: Any) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("log_level: LOUD\n")
        runner = CliRunner()
        result = runner.invoke(main, ["--config", str(config), "serve"], input="")
        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_bad_timeout_env(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve"], input="", env={"ABACUS_TIMEOUT": "soon"})
        assert result.exit_code == 1
        assert "Config error" in result.output
        assert "ABACUS_TIMEOUT" in result.output
