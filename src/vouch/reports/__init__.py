from vouch.reports.base import RecordingReporter, Reporter
from vouch.reports.console import ConsoleReporter

__all__ = [
    "ConsoleReporter",
    "RecordingReporter",
    "Reporter",
]
