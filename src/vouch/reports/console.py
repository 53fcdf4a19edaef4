"""Console reporter for vouch test output using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.text import Text

from vouch.reports.base import Reporter


class ConsoleReporter(Reporter):
    """Reporter that prints the run report to the console using Rich styling."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(file=sys.__stdout__)

    def log(self, message: str = "") -> None:
        self.emit(message)

    def emit(self, message: str = "", style: str | None = None) -> None:
        # Text bypasses markup parsing, so brackets in test names print verbatim.
        self.console.print(Text(message, style=style or ""))
