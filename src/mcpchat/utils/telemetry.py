"""OpenTelemetry tracing for mcpchat.

Modules take a tracer from :func:`get_tracer` and open spans around tool
calls and chat requests::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcp.tools.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, "echo")

Until :func:`configure_telemetry` installs an SDK provider, the API hands out
no-op tracers and spans cost nothing. The SDK and the OTLP exporter come with
the ``otel`` extra (``pip install mcpchat[otel]``).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from collections.abc import Iterator

# Span attribute keys. Tool-call spans carry the tool keys; chat request
# spans carry the HTTP, model, message and token keys.
ATTR_TOOL_NAME = "mcpchat.tool.name"
ATTR_TOOL_IS_ERROR = "mcpchat.tool.is_error"
ATTR_HTTP_PATH = "mcpchat.http.path"
ATTR_HTTP_STATUS = "mcpchat.http.status_code"
ATTR_MODEL = "mcpchat.model"
ATTR_MESSAGE_COUNT = "mcpchat.messages"
ATTR_TOKENS_PROMPT = "mcpchat.tokens.prompt"
ATTR_TOKENS_COMPLETION = "mcpchat.tokens.completion"
ATTR_TOKENS_TOTAL = "mcpchat.tokens.total"

_INSTRUMENTATION_NAME = "mcpchat"
_SDK_HINT = "Install it with: pip install mcpchat[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return the tracer for *name* (a no-op until telemetry is configured)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "mcpchat",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider as the global provider.

    Spans go to stderr when *export_to_console* is set (stdout carries the
    JSON-RPC stream while serving) and to *otlp_endpoint* over OTLP/gRPC when
    one is given.

    Raises:
        ImportError: If ``opentelemetry-sdk`` is missing, or an OTLP endpoint
            is given without ``opentelemetry-exporter-otlp``.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for configure_telemetry(). {_SDK_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> Iterator[object]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    if export_to_console:
        yield SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_SDK_HINT}"
            raise ImportError(msg) from exc
        yield BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
