"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import mcpchat

    assert mcpchat.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from mcpchat.cli import main

    assert callable(main)


def test_chat_imports() -> None:
    from mcpchat.chat import (
        ChatClientError,
        ClientConfig,
        CompletionsClient,
        DeploymentChatClient,
    )

    assert CompletionsClient is not None
    assert DeploymentChatClient is not None
    assert ClientConfig is not None
    assert issubclass(ChatClientError, Exception)


def test_server_imports() -> None:
    from mcpchat.protocols.mcp.server import MCPServer
    from mcpchat.tools import register_builtin_tools

    server = MCPServer("smoke", "0.0.0")
    register_builtin_tools(server.registry)
    assert len(server.registry) == 3
