from vouch.tracing.lifecycle import get_tracer, init_tracing, set_trace_output_path
from vouch.tracing.tracer import TestTracer

__all__ = [
    "TestTracer",
    "get_tracer",
    "init_tracing",
    "set_trace_output_path",
]
