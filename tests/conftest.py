from pathlib import Path

import pytest

from vouch.reports import RecordingReporter
from vouch.testing import RunContext


SPECS_DIR = Path(__file__).parent / "fixtures" / "specs"


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def context(reporter: RecordingReporter) -> RunContext:
    """A fresh run context that reports into memory."""
    return RunContext(reporter=reporter)


@pytest.fixture
def specs_dir() -> Path:
    return SPECS_DIR
