"""Execution context published while a test and its per-test hooks run."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator


TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)


@dataclass(frozen=True, slots=True)
class TestContext:
    """Identity of the test currently executing.

    Attributes
    ----------
    class_name
        Display name of the test class.
    test_name
        Method name of the test.
    display_name
        Name shown in reports for the test.
    tags
        Method tags merged with class tags.
    """

    __test__ = False

    class_name: str
    test_name: str
    display_name: str
    tags: frozenset[str] = field(default_factory=frozenset)


def current_test() -> TestContext | None:
    """Return the context of the running test, if any."""
    return TEST_CONTEXT.get()


@contextmanager
def running_test_scope(ctx: TestContext) -> Iterator[None]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)


__all__ = ["TEST_CONTEXT", "TestContext", "current_test", "running_test_scope"]
