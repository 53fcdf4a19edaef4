"""Reporter interface and the plain-text run report."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from vouch.errors import ModuleLoadError
    from vouch.testing.models import RunResult, TestOutcome
    from vouch.testing.suite import Suite


class Reporter(ABC):
    """Receives run events and renders them as text lines.

    Subclasses only need to implement :meth:`log`. The default hooks produce
    the standard report: a run banner, one header per suite with its test
    count, one line per test, and a final tally. Override :meth:`emit` to
    style lines without changing their text.

    Lifecycle hooks are coroutines awaited by the runner, except
    :meth:`on_test_skipped` and :meth:`on_suite_skipped`. Skips are declared
    from plain synchronous code (``it.skip(...)`` at module import), so those
    two hooks are called directly and must stay synchronous; overriding them
    with ``async def`` raises ``TypeError`` when the subclass is defined.
    """

    SYNC_HOOKS = ("on_test_skipped", "on_suite_skipped")

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        for name in cls.SYNC_HOOKS:
            if inspect.iscoroutinefunction(cls.__dict__.get(name)):
                msg = f"{cls.__name__}.{name} must be a regular method, not a coroutine function"
                raise TypeError(msg)

    @abstractmethod
    def log(self, message: str = "") -> None:
        """Emit one line of output."""

    def emit(self, message: str = "", style: str | None = None) -> None:
        self.log(message)

    async def on_run_start(self) -> None:
        self.emit("Running tests...", "bold")

    async def on_suite_start(self, suite: Suite) -> None:
        self.emit()
        self.emit(f"  {suite.display_name} [{len(suite.queue)} tests]", "bold")

    async def on_test_complete(self, outcome: TestOutcome) -> None:
        if outcome.status.is_failure:
            self.emit(f"   ❌ {outcome.display_name}. {outcome.message}.", "red")
        else:
            self.emit(f"   ✅ {outcome.display_name}.", "green")

    def on_test_skipped(self, name: str | None) -> None:
        if name is not None:
            self.emit(f"   ⚠️ {name or '{unnamed test}'} skipped.", "yellow")

    def on_suite_skipped(self, name: str | None) -> None:
        if name is not None:
            self.emit()
            self.emit(f"  {name or '{unnamed suite}'} skipped.", "yellow")

    async def on_module_error(self, error: ModuleLoadError) -> None:
        self.emit()
        self.emit(str(error), "red")

    async def on_run_complete(self, result: RunResult) -> None:
        tally = result.tally
        self.emit()
        self.emit("Tests finished.", "bold")
        self.emit()
        if tally.skipped_suites:
            self.emit(f"⚠️ {tally.skipped_suites} suites skipped.", "yellow")
        if tally.skipped_tests:
            self.emit(f"⚠️ {tally.skipped_tests} tests skipped.", "yellow")
        celebration = "" if tally.failed else " 🎉"
        self.emit(f"✅ {tally.passed} tests passed.{celebration}", "green")
        if tally.failed:
            self.emit(f"❌ {tally.failed} tests failed.", "red")


class RecordingReporter(Reporter):
    """Reporter that keeps the report lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, message: str = "") -> None:
        self.lines.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
