"""Tests for the newline-delimited stream transport."""

from __future__ import annotations

import io
import json
from unittest.mock import MagicMock

import pytest

from mcpchat.protocols.errors import TransportError
from mcpchat.protocols.mcp.transport import LineTransport, StreamTransport


class TestLineTransportProtocol:
    def test_stream_satisfies_protocol(self) -> None:
        transport = StreamTransport(io.StringIO(), io.StringIO())
        assert isinstance(transport, LineTransport)

    def test_stdio_binds_standard_streams(self) -> None:
        import sys

        transport = StreamTransport.stdio()
        assert transport._reader is sys.stdin
        assert transport._writer is sys.stdout


class TestStreamTransport:
    def test_read_lines_then_eof(self) -> None:
        transport = StreamTransport(io.StringIO('{"a":1}\nsecond\r\n'), io.StringIO())
        assert transport.read_line() == '{"a":1}'
        assert transport.read_line() == "second"
        assert transport.read_line() is None

    def test_last_line_without_newline(self) -> None:
        transport = StreamTransport(io.StringIO("tail"), io.StringIO())
        assert transport.read_line() == "tail"
        assert transport.read_line() is None

    def test_blank_line_is_not_eof(self) -> None:
        transport = StreamTransport(io.StringIO("\nnext\n"), io.StringIO())
        assert transport.read_line() == ""
        assert transport.read_line() == "next"

    def test_write_message_single_compact_line(self) -> None:
        out = io.StringIO()
        transport = StreamTransport(io.StringIO(), out)
        transport.write_message({"jsonrpc": "2.0", "id": 1, "result": {"text": "a\nb"}})

        written = out.getvalue()
        assert written.endswith("\n")
        assert written.count("\n") == 1
        assert json.loads(written) == {"jsonrpc": "2.0", "id": 1, "result": {"text": "a\nb"}}

    def test_write_flushes(self) -> None:
        writer = MagicMock()
        transport = StreamTransport(io.StringIO(), writer)
        transport.write_message({"x": 1})
        writer.flush.assert_called_once()

    def test_read_error_wrapped(self) -> None:
        reader = MagicMock()
        reader.readline.side_effect = OSError("broken")
        transport = StreamTransport(reader, io.StringIO())
        with pytest.raises(TransportError, match="broken"):
            transport.read_line()

    def test_write_error_wrapped(self) -> None:
        writer = MagicMock()
        writer.write.side_effect = OSError("pipe closed")
        transport = StreamTransport(io.StringIO(), writer)
        with pytest.raises(TransportError, match="pipe closed"):
            transport.write_message({"x": 1})

    def test_use_after_close_raises(self) -> None:
        transport = StreamTransport(io.StringIO("x\n"), io.StringIO())
        transport.close()
        with pytest.raises(TransportError, match="closed"):
            transport.read_line()
        with pytest.raises(TransportError, match="closed"):
            transport.write_message({})


class TestUndecodableInput:
    def test_invalid_utf8_replaced_not_raised(self) -> None:
        reader = io.TextIOWrapper(io.BytesIO(b"\xff\xfe garbage\nnext\n"), encoding="utf-8")
        transport = StreamTransport(reader, io.StringIO())
        assert transport.read_line() == "\ufffd\ufffd garbage"
        assert transport.read_line() == "next"
        assert transport.read_line() is None
