"""Tests for the vouch command line."""

import logging
from io import StringIO

import pytest
from rich.console import Console
from rich.logging import RichHandler

from vouch.cli import CLIApplication, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    # setenv first so variables loaded from .env are removed again afterwards.
    for name in ("VOUCH_PATH", "VOUCH_SUFFIX", "VOUCH_TRACE_OUTPUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def app(output) -> CLIApplication:
    return CLIApplication(Console(file=output, no_color=True, width=120))


def test_passing_run_exits_zero(app, output, specs_dir):
    code = app.run(["run", "showcase", "--path", str(specs_dir)])

    assert code == 0
    assert "✅ 11 tests passed. 🎉" in output.getvalue()


def test_failing_run_exits_one(app, output, specs_dir):
    code = app.run(["run", "showcase", "tally", "--path", str(specs_dir)])

    assert code == 1
    assert "❌ 1 tests failed." in output.getvalue()


def test_module_error_exits_one(app, output, specs_dir):
    code = app.run(["run", "broken", "--path", str(specs_dir)])

    assert code == 1
    assert "Error loading test broken: broken on purpose" in output.getvalue()


def test_invalid_suffix_exits_two(app, output, specs_dir):
    code = app.run(["run", "showcase", "--path", str(specs_dir), "--suffix", "_spec.js"])

    assert code == 2
    assert "Invalid configuration" in output.getvalue()
    # The pydantic details are printed verbatim, not parsed as markup.
    assert "input_value='_spec.js'" in output.getvalue()


def test_path_from_dotenv(app, output, specs_dir, tmp_path):
    (tmp_path / ".env").write_text(f"VOUCH_PATH={specs_dir}\n")

    assert app.run(["run", "showcase"]) == 0


def test_requires_a_module(app):
    with pytest.raises(SystemExit):
        app.run(["run"])


def test_configure_logging_replaces_handler():
    logger = logging.getLogger("vouch")
    configure_logging("DEBUG", Console(file=StringIO()))
    configure_logging("INFO", Console(file=StringIO()))

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.INFO
