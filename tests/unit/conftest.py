"""Shared fixtures for unit tests."""

import asyncio
import io

import pytest
from rich.console import Console

from casebook.testing.runner import RunOptions, Runner


class RecordingReporter:
    """Reporter that remembers every event it receives."""

    def __init__(self):
        self.events = []

    def on_run_start(self, total_classes):
        self.events.append(("run_start", total_classes))

    def on_suite_start(self, class_name, total_tests):
        self.events.append(("suite_start", class_name, total_tests))

    def on_test_start(self, test_name):
        self.events.append(("test_start", test_name))

    def on_test_passed(self, test_name):
        self.events.append(("passed", test_name))

    def on_test_failed(self, test_name, error_message):
        self.events.append(("failed", test_name, error_message))

    def on_test_skipped(self, test_name, reason):
        self.events.append(("skipped", test_name, reason))

    def on_test_end(self, test_name, result):
        self.events.append(("test_end", test_name, result.status.value))

    def on_hook_error(self, class_name, hook_name, error):
        self.events.append(("hook_error", class_name, hook_name, type(error).__name__))

    def on_suite_end(self, class_name, elapsed):
        self.events.append(("suite_end", class_name))

    def on_run_end(self, elapsed):
        self.events.append(("run_end",))

    def names(self):
        return [event[0] for event in self.events]


@pytest.fixture
def recorder() -> RecordingReporter:
    """Provide a reporter that records events."""
    return RecordingReporter()


@pytest.fixture
def console() -> Console:
    """Console writing to memory so reports stay out of test output."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def run_cases(console):
    """Collect the given classes and run them once, returning the runner."""

    def _run(*classes, runner_kwargs=None, **options):
        runner = Runner(classes, console=console, **(runner_kwargs or {}))
        asyncio.run(runner.run(RunOptions(**options)))
        return runner

    return _run
