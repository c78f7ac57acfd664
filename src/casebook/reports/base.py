"""Base reporter protocol for casebook run output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from casebook.testing.results import TestCaseResult


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for run reporters.

    Only :meth:`on_run_start` and :meth:`on_run_end` are required; the runner
    looks the other callbacks up by name and skips the ones a reporter does
    not define. Methods may be plain or ``async``; coroutines are awaited in
    order before the run continues. Reporters observe the run and cannot
    change its outcome.
    """

    def on_run_start(self, total_classes: int) -> Any:
        """Called once before the first test class runs."""
        ...

    def on_run_end(self, elapsed: float) -> Any:
        """Called once after every class has run, with the run time in seconds."""
        ...


OPTIONAL_CALLBACKS = (
    "on_suite_start",
    "on_suite_end",
    "on_test_start",
    "on_test_end",
    "on_test_passed",
    "on_test_failed",
    "on_test_skipped",
    "on_hook_error",
    "get_report",
)
"""Callbacks a reporter may implement in addition to the required two:

- ``on_suite_start(class_name, total_tests)``
- ``on_suite_end(class_name, elapsed)``
- ``on_test_start(test_name)``
- ``on_test_end(test_name, result)``
- ``on_test_passed(test_name)``
- ``on_test_failed(test_name, error_message)``
- ``on_test_skipped(test_name, reason)``
- ``on_hook_error(class_name, hook_name, error)``
- ``get_report()``
"""


__all__ = ["OPTIONAL_CALLBACKS", "Reporter"]
