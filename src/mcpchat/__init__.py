"""mcpchat — stdio MCP tool server and chat API clients."""

from __future__ import annotations

__version__ = "0.1.0"
