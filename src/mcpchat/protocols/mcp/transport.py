"""MCP transports — newline-delimited JSON over a pair of text streams.

Each transport satisfies the :class:`LineTransport` protocol, providing
``read_line``, ``write_message``, and ``close`` methods.
"""

from __future__ import annotations

import io
import json
import sys
from typing import Any, Protocol, TextIO, runtime_checkable

from mcpchat.protocols.errors import TransportError


@runtime_checkable
class LineTransport(Protocol):
    """Abstract line-oriented transport for MCP JSON-RPC communication."""

    def read_line(self) -> str | None: ...
    def write_message(self, data: dict[str, Any]) -> None: ...
    def close(self) -> None: ...


class StreamTransport:
    """Reads requests from *reader* and writes responses to *writer*.

    One JSON document per line in both directions. A buffered text reader is
    switched to replace undecodable bytes, so a line with invalid UTF-8
    reaches the server as a malformed line instead of failing the stream.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        _replace_undecodable(reader)
        self._reader = reader
        self._writer = writer
        self._closed = False

    @classmethod
    def stdio(cls) -> StreamTransport:
        """Bind to the process's standard input and output."""
        return cls(sys.stdin, sys.stdout)

    def read_line(self) -> str | None:
        """Return the next line without its terminator, or ``None`` at end of input."""
        if self._closed:
            msg = "Transport closed"
            raise TransportError(msg)
        try:
            line = self._reader.readline()
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            raise TransportError(f"error reading input: {exc}") from exc
        if not line:
            return None
        return line.rstrip("\r\n")

    def write_message(self, data: dict[str, Any]) -> None:
        """Write *data* as a single JSON line and flush."""
        if self._closed:
            msg = "Transport closed"
            raise TransportError(msg)
        line = json.dumps(data, separators=(",", ":")) + "\n"
        try:
            self._writer.write(line)
            self._writer.flush()
        except (OSError, ValueError) as exc:
            raise TransportError(f"error writing output: {exc}") from exc

    def close(self) -> None:
        """Stop using the streams. The streams themselves belong to the caller."""
        self._closed = True


def _replace_undecodable(reader: TextIO) -> None:
    if not isinstance(reader, io.TextIOWrapper) or reader.errors == "replace":
        return
    try:
        reader.reconfigure(errors="replace")
    except (OSError, ValueError):
        # Already partly read; decode errors surface as TransportError.
        pass
