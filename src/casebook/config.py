"""Project configuration from ``[tool.casebook]`` in pyproject.toml."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import TypeAdapter, ValidationError

from casebook.errors import ConfigurationError
from casebook.testing.collector import DEFAULT_PATTERN
from casebook.types import Environment


ENVIRONMENT_VARIABLE = "CASEBOOK_ENVIRONMENT"
PYPROJECT = "pyproject.toml"


@dataclass
class CasebookConfig:
    """Settings shared by the CLI and programmatic runs."""

    test_paths: list[str] = field(default_factory=lambda: ["."])
    pattern: str = DEFAULT_PATTERN
    include_tags: list[str] = field(default_factory=list)
    keyword: str | None = None
    environment: Environment = Environment.SERVER
    verbosity: int = 0
    addopts: list[str] = field(default_factory=list)
    reporters: list[str] = field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = field(default_factory=dict)
    print_report: bool = True


DEFAULT_CONFIG = CasebookConfig()

_adapter = TypeAdapter(CasebookConfig)


def parse_environment(value: str) -> Environment:
    """Parse an environment name case-insensitively."""
    for environment in Environment:
        if environment.value.lower() == value.strip().lower():
            return environment
    choices = ", ".join(e.value for e in Environment)
    msg = f"Unknown environment {value!r}. Expected one of: {choices}"
    raise ConfigurationError(msg)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def config_from_mapping(data: dict[str, Any]) -> CasebookConfig:
    """Build a config from a ``[tool.casebook]`` table."""
    known = {f.name for f in fields(CasebookConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        msg = f"Unknown [tool.casebook] keys: {', '.join(unknown)}"
        raise ConfigurationError(msg)

    values = dict(data)
    if isinstance(values.get("environment"), str):
        values["environment"] = parse_environment(values["environment"])

    try:
        return _adapter.validate_python(values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [tool.casebook] settings: {exc}") from exc


def load_config(start: Path | None = None) -> CasebookConfig:
    """Load settings from pyproject.toml, then apply environment overrides.

    A ``.env`` file found from the working directory upwards is loaded
    first; ``CASEBOOK_ENVIRONMENT`` overrides the configured environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    data: dict[str, Any] = {}
    path = find_pyproject(start)
    if path is not None:
        try:
            with path.open("rb") as fh:
                document = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc
        data = document.get("tool", {}).get("casebook", {})

    config = config_from_mapping(data)

    override = os.getenv(ENVIRONMENT_VARIABLE)
    if override:
        config.environment = parse_environment(override)
    return config


__all__ = [
    "CasebookConfig",
    "DEFAULT_CONFIG",
    "ENVIRONMENT_VARIABLE",
    "config_from_mapping",
    "find_pyproject",
    "load_config",
    "parse_environment",
]
