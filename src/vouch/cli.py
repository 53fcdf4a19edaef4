"""Command line interface: ``vouch run MODULE [MODULE ...]``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from vouch.config import RunConfig
from vouch.reports import ConsoleReporter
from vouch.testing.runner import Runner


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str, console: Console | None = None) -> RichHandler:
    """Attach a RichHandler writing to stderr to the ``vouch`` logger."""
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=level == "DEBUG",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("vouch")
    logger.setLevel(level)
    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    return handler


class CLIApplication:
    """Top-level command router."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.parser = argparse.ArgumentParser(
            prog="vouch",
            description="Run describe/it test modules.",
        )
        subparsers = self.parser.add_subparsers(dest="command", required=True)
        run = subparsers.add_parser("run", help="Run test modules in order.")
        run.add_argument(
            "modules",
            nargs="+",
            help="Test module identifiers, resolved as <path>/<module><suffix>.",
        )
        run.add_argument("--path", help="Base path for module identifiers (default: ./ or VOUCH_PATH).")
        run.add_argument("--suffix", help="File name suffix (default: _spec.py or VOUCH_SUFFIX).")
        run.add_argument(
            "--trace-output",
            dest="trace_output",
            help="Write one OpenTelemetry span per test to this JSONL file.",
        )
        run.add_argument(
            "--log-level",
            dest="log_level",
            choices=LOG_LEVELS,
            default="WARNING",
            help="Level for framework log messages on stderr (default: WARNING).",
        )

    def run(self, argv: Sequence[str] | None = None) -> int:
        load_dotenv(Path.cwd() / ".env")
        args = self.parser.parse_args(argv)
        return RunCommand(self.console, args).run()


class RunCommand:
    """Driver for `vouch run`."""

    def __init__(self, console: Console, args: argparse.Namespace) -> None:
        self.console = console
        self.modules: list[str] = args.modules
        self.log_level: str = args.log_level
        self.overrides = {
            key: value
            for key, value in (
                ("path", args.path),
                ("suffix", args.suffix),
                ("trace_output", args.trace_output),
            )
            if value is not None
        }

    def run(self) -> int:
        configure_logging(self.log_level)
        try:
            config = RunConfig(**self.overrides)
        except ValidationError as e:
            self.console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
            return 2
        runner = Runner(config, ConsoleReporter(self.console))
        result = asyncio.run(runner.run(self.modules))
        return 0 if result.ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    return CLIApplication().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
