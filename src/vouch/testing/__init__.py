"""Suite scheduling, the run context and the runner.

Import order matters: models and context come before the modules that use
them.
"""

from .models import RunResult, SuiteState, Tally, TestCase, TestOutcome, TestStatus
from .context import RunContext, get_default_context, get_run_context, run_scope
from .suite import Suite, after_each, before_each, describe, it, skip_suite, skip_test
from .expect import expect, extend
from .runner import Runner, run


__all__ = [
    "RunContext",
    "RunResult",
    "Runner",
    "Suite",
    "SuiteState",
    "Tally",
    "TestCase",
    "TestOutcome",
    "TestStatus",
    "after_each",
    "before_each",
    "describe",
    "expect",
    "extend",
    "get_default_context",
    "get_run_context",
    "it",
    "run",
    "run_scope",
    "skip_suite",
    "skip_test",
]
