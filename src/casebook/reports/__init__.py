"""Reporting module for casebook run output."""

from casebook.reports.base import Reporter
from casebook.reports.buffered import BufferedReporter, RunReport
from casebook.reports.console import ConsoleReporter
from casebook.reports.group import ReporterGroup
from casebook.reports.registry import (
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)
register_builtin(BufferedReporter)

__all__ = [
    "BufferedReporter",
    "ConsoleReporter",
    "Reporter",
    "ReporterGroup",
    "RunReport",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
