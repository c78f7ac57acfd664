"""Reporter that keeps its output in memory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from casebook.testing.results import TestCaseResult


class TestReport(BaseModel):
    """Outcome of one test as seen by a reporter."""

    __test__ = False

    test_name: str
    passed: bool
    skipped: bool
    error_message: str | None = None
    time_elapsed: float


class ClassReport(BaseModel):
    class_name: str
    tests: list[TestReport] = Field(default_factory=list)


class RunReport(BaseModel):
    """Structured summary of a run."""

    passed_tests: int = 0
    failed_tests: int = 0
    skipped_tests: int = 0
    total_tests: int = 0
    results: list[ClassReport] = Field(default_factory=list)


class BufferedReporter:
    """Collect event lines and a final summary instead of printing them."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.results: dict[str, dict[str, TestCaseResult]] = {}
        self.passed_tests = 0
        self.failed_tests = 0
        self.skipped_tests = 0

    def on_run_start(self, total_classes: int) -> None:
        self.lines = [f"Running {total_classes} test classes..."]
        self.results = {}
        self.passed_tests = 0
        self.failed_tests = 0
        self.skipped_tests = 0

    def on_test_start(self, test_name: str) -> None:
        self.lines.append(f"Running test: {test_name}")

    def on_test_passed(self, test_name: str) -> None:
        self.lines.append(f"{test_name} PASSED")

    def on_test_failed(self, test_name: str, error_message: str | None = None) -> None:
        self.lines.append(f"{test_name} FAILED: {error_message}")

    def on_test_skipped(self, test_name: str, reason: str | None = None) -> None:
        self.lines.append(f"{test_name} SKIPPED: {reason or 'no reason given'}")

    def on_test_end(self, test_name: str, result: TestCaseResult) -> None:
        self.results.setdefault(result.class_name, {})[test_name] = result
        if result.passed:
            self.passed_tests += 1
        elif result.skipped:
            self.skipped_tests += 1
        else:
            self.failed_tests += 1

    def on_run_end(self, elapsed: float) -> None:
        self.lines.append(self._summary(elapsed))

    @property
    def total_tests(self) -> int:
        return self.passed_tests + self.failed_tests + self.skipped_tests

    def get_report(self) -> str:
        return "\n".join(self.lines)

    def get_report_object(self) -> RunReport:
        return RunReport(
            passed_tests=self.passed_tests,
            failed_tests=self.failed_tests,
            skipped_tests=self.skipped_tests,
            total_tests=self.total_tests,
            results=[
                ClassReport(
                    class_name=class_name,
                    tests=[
                        TestReport(
                            test_name=test_name,
                            passed=result.passed,
                            skipped=result.skipped,
                            error_message=result.error_message,
                            time_elapsed=result.time_elapsed,
                        )
                        for test_name, result in tests.items()
                    ],
                )
                for class_name, tests in self.results.items()
            ],
        )

    def _summary(self, elapsed: float) -> str:
        if self.total_tests == 0:
            return "No tests ran."

        parts: list[str] = []
        for class_name, tests in self.results.items():
            ok = all(r.passed or r.skipped for r in tests.values())
            parts.append(f"[{'+' if ok else 'x'}] {class_name}")
            for test_name, result in tests.items():
                status = "PASSED" if result.passed else "SKIPPED" if result.skipped else "FAILED"
                parts.append(f" │\t{test_name} ({round(result.time_elapsed * 1000)}ms) {status}")
            parts.append("")

        if self.failed_tests:
            parts.append("Failures:")
            failures = [
                (class_name, test_name, result)
                for class_name, tests in self.results.items()
                for test_name, result in tests.items()
                if not result.passed and not result.skipped
            ]
            for number, (class_name, test_name, result) in enumerate(failures, start=1):
                parts.append(f"{number}. {class_name}.{test_name}")
                parts.append("   " + (result.error_message or "").replace("\n", "\n   "))
                parts.append("")

        parts.append(f"\tRan {self.total_tests} tests in {round(elapsed * 1000)}ms")
        parts.append(f"\t\tPassed: {self.passed_tests}")
        parts.append(f"\t\tFailed: {self.failed_tests}")
        parts.append(f"\t\tSkipped: {self.skipped_tests}")
        return "\n".join(parts)
