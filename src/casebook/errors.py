"""Error types raised by casebook itself (never by test outcomes)."""

from pathlib import Path
from typing import Any


class CasebookError(Exception):
    """Base class for framework errors."""


class ConfigurationError(CasebookError):
    """Raised when tests or settings are misconfigured (developer error)."""


class CollectionError(CasebookError):
    """Raised when a test class or module cannot be collected."""

    def __init__(
        self,
        target: type | Path | str,
        reason: str,
        cause: BaseException | None = None,
    ) -> None:
        self.target = target
        self.reason = reason
        self.cause = cause

        message = f"Could not collect {_describe(target)}: {reason}"
        if cause is not None:
            message += f"\nCause: {type(cause).__name__}: {cause}"

        super().__init__(message)


def _describe(target: Any) -> str:
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    return str(target)
