"""vouch - a small describe/it/expect test framework."""

from .assertions import Expectation, MatcherRegistry, deep_equal
from .config import RunConfig
from .errors import AssertionFailure, MatcherRegistrationError, ModuleLoadError, RegistrationError, VouchError
from .mocking import Call, Mock, mock_fn
from .reports import ConsoleReporter, RecordingReporter, Reporter
from .testing import (
    RunContext,
    RunResult,
    Runner,
    Suite,
    after_each,
    before_each,
    describe,
    expect,
    extend,
    it,
    run,
    run_scope,
    skip_suite,
    skip_test,
)
from .version import __version__


__all__ = [
    # Declaring tests
    "describe",
    "it",
    "before_each",
    "after_each",
    "skip_suite",
    "skip_test",
    # Assertions
    "expect",
    "extend",
    "Expectation",
    "MatcherRegistry",
    "deep_equal",
    # Mocking
    "Call",
    "Mock",
    "mock_fn",
    # Running
    "run",
    "Runner",
    "RunConfig",
    "RunContext",
    "RunResult",
    "Suite",
    "run_scope",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    "RecordingReporter",
    # Errors
    "VouchError",
    "AssertionFailure",
    "ModuleLoadError",
    "RegistrationError",
    "MatcherRegistrationError",
]
