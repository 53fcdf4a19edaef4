"""Test tracer - handles tracing for test execution."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from opentelemetry.trace import Span, StatusCode

from vouch.tracing.lifecycle import get_tracer


if TYPE_CHECKING:
    from vouch.testing.models import TestCase, TestOutcome


@dataclass
class TestTracer:
    """Handles tracing spans for test execution."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    enabled: bool = False

    @contextmanager
    def span(self, suite_name: str, test: TestCase) -> Iterator[Span | None]:
        """Context manager for optional tracing."""
        if not self.enabled:
            yield None
            return

        with get_tracer().start_as_current_span(f"test.{suite_name}::{test.name}") as span:
            span.set_attribute("test.suite", suite_name)
            span.set_attribute("test.name", test.name)
            yield span

    def record(self, span: Span | None, outcome: TestOutcome) -> None:
        """Record span attributes from a test outcome."""
        if not span:
            return
        span.set_attribute("test.status", outcome.status.value)
        span.set_attribute("test.duration_ms", outcome.duration_ms)
        if outcome.error:
            span.set_status(StatusCode.ERROR, str(outcome.error))
            span.record_exception(outcome.error)
