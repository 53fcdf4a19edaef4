"""Lifecycle management for OpenTelemetry tracing in vouch.

Sets up the tracer provider with the streaming exporter and exposes helpers
for getting a tracer and redirecting the output file.
"""

from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from vouch.tracing.exporters import StreamingFileSpanExporter


_exporter: StreamingFileSpanExporter | None = None


def init_tracing(*, output_path: Path | str, service_name: str = "vouch") -> None:
    """Initialize OpenTelemetry tracing with streaming file export.

    The global tracer provider can only be installed once per process, so
    later calls just point the existing exporter at ``output_path``.
    """
    global _exporter

    if _exporter is not None:
        set_trace_output_path(output_path)
        return

    _exporter = StreamingFileSpanExporter(output_path)
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)


def set_trace_output_path(output_path: Path | str) -> None:
    """Redirect the exporter to a fresh file."""
    if _exporter is None:
        init_tracing(output_path=output_path)
        return
    _exporter.output_path = Path(output_path)
    _exporter.reset()


def get_tracer(name: str = "vouch") -> trace.Tracer:
    """Get a tracer instance for creating spans."""
    return trace.get_tracer(name)
