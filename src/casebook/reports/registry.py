"""Name-based lookup of reporter classes for the CLI and ``[tool.casebook]``.

``casebook run --reporter NAME`` and the ``reporters`` config key refer to
reporters by registry name or by import path. Constructor keyword arguments
come from ``reporter_options``, keyed by the same name.
"""

from __future__ import annotations

import importlib
from typing import Any, TypeVar

from casebook.reports.base import Reporter


T = TypeVar("T")

_reporter_registry: dict[str, type] = {}
_builtin_registry: dict[str, type] = {}


def reporter(
    cls: type[T] | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> type[T] | Any:
    """Make a reporter class selectable by name.

    Bare or with arguments::

        @reporter
        class JUnitReporter: ...

        @reporter(name="junit")
        class JUnitReporter: ...

    ``enabled=False`` leaves the class unregistered. The class is returned
    unchanged either way.
    """

    def register(cls: type[T]) -> type[T]:
        if enabled:
            _reporter_registry[name or cls.__name__] = cls
        return cls

    if cls is not None:
        return register(cls)
    return register


def register_builtin(cls: type[T]) -> type[T]:
    """Register a reporter shipped with casebook; it survives a clear."""
    _reporter_registry[cls.__name__] = cls
    _builtin_registry[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Forget user reporters and keep the built-in ones."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def _import_reporter_class(import_path: str) -> type:
    if ":" in import_path:
        module_path, class_name = import_path.rsplit(":", 1)
    elif "." in import_path:
        module_path, class_name = import_path.rsplit(".", 1)
    else:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    cls = getattr(importlib.import_module(module_path), class_name)
    # Only the two required callbacks are checked; the rest are optional.
    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{import_path} does not implement the Reporter protocol"
        raise TypeError(msg)
    return cls


def resolve_reporter(name: str, **kwargs: Any) -> Reporter:
    """Build one reporter from a registry name or a ``module:Class`` path.

    ``kwargs`` are the entry's ``reporter_options``.

    Raises:
        ValueError: ``name`` is neither registered nor an import path.
        TypeError: The imported class lacks ``on_run_start``/``on_run_end``.
    """
    if name in _reporter_registry:
        return _reporter_registry[name](**kwargs)

    if ":" in name or "." in name:
        return _import_reporter_class(name)(**kwargs)

    available = ", ".join(sorted(_reporter_registry))
    msg = f"Unknown reporter: {name}. Available: {available}"
    raise ValueError(msg)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
) -> list[Reporter]:
    """Build reporters in the order given, each with its own options."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
