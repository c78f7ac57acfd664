"""Live console output of a run using rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from casebook.testing.results import TestCaseResult


class ConsoleReporter:
    """Print progress while tests run.

    Verbosity below zero prints nothing; zero prints class headers,
    failures and skips; one and above also prints passing tests and hook
    failures.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def on_run_start(self, total_classes: int) -> None:
        if self.verbosity >= 0:
            self.console.print(f"[bold]Running {total_classes} test classes[/bold]")

    def on_suite_start(self, class_name: str, total_tests: int) -> None:
        if self.verbosity >= 0 and total_tests:
            self.console.print(f"\n[bold]{escape(class_name)}[/bold] ({total_tests} tests)")

    def on_test_passed(self, test_name: str) -> None:
        if self.verbosity > 0:
            self.console.print(f"  [green]+[/green] {escape(test_name)}")

    def on_test_failed(self, test_name: str, error_message: str | None = None) -> None:
        if self.verbosity >= 0:
            detail = f": {escape(error_message)}" if error_message else ""
            self.console.print(f"  [red]x[/red] {escape(test_name)}{detail}")

    def on_test_skipped(self, test_name: str, reason: str | None = None) -> None:
        if self.verbosity >= 0:
            detail = f" ({escape(reason)})" if reason else ""
            self.console.print(f"  [yellow]-[/yellow] {escape(test_name)}{detail}")

    def on_test_end(self, test_name: str, result: TestCaseResult) -> None:
        if self.verbosity > 1:
            self.console.print(f"    [dim]{round(result.time_elapsed * 1000)}ms[/dim]")

    def on_hook_error(self, class_name: str, hook_name: str, error: BaseException) -> None:
        if self.verbosity > 0:
            self.console.print(
                f"  [yellow]hook {escape(class_name)}.{escape(hook_name)} raised "
                f"{escape(type(error).__name__)}: {escape(str(error))}[/yellow]"
            )

    def on_run_end(self, elapsed: float) -> None:
        if self.verbosity >= 0:
            self.console.print(f"\n[bold]Finished in {elapsed:.2f}s[/bold]")
