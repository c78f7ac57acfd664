"""CLI module for the casebook test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from casebook.config import CasebookConfig, load_config, parse_environment
from casebook.errors import CasebookError
from casebook.reports import ConsoleReporter, ReporterGroup, resolve_reporters
from casebook.reports.base import Reporter
from casebook.testing.keyword import KeywordMatcher
from casebook.testing.runner import RunOptions, Runner
from casebook.types import Environment


DEFAULT_REPORTER = "ConsoleReporter"


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the casebook CLI."""
    console = Console()
    try:
        config = load_config()
    except CasebookError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(2) from exc

    parser = _build_parser()
    args = parser.parse_args(_with_addopts(list(sys.argv[1:] if argv is None else argv), config))

    if args.command in ("run", "list"):
        raise SystemExit(_dispatch(args, config, console))

    parser.print_help()
    raise SystemExit(0)


def _with_addopts(argv: list[str], config: CasebookConfig) -> list[str]:
    if config.addopts and argv and argv[0] in ("run", "list"):
        return [argv[0], *config.addopts, *argv[1:]]
    return argv


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="casebook", description="Class-based unit test runner")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run test classes")
    list_parser = subparsers.add_parser("list", help="List the tests that would run")

    for sub in (run_parser, list_parser):
        sub.add_argument("paths", nargs="*", help="Test files, directories or modules")
        sub.add_argument("-t", "--tag", dest="tags", action="append", help="Run tests with given tag")
        sub.add_argument("-k", "--keyword", help="Filter tests by keyword expression")
        sub.add_argument(
            "--environment",
            help="Environment to run as (Server or Client)",
        )
        sub.add_argument("--pattern", help="Glob for test files inside directories")
        sub.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
        sub.add_argument("-v", "--verbose", action="count", default=0, help="Increase CLI output")

    run_parser.add_argument(
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import path (repeatable)",
    )
    run_parser.add_argument(
        "--no-report",
        action="store_true",
        help="Do not print the final report tree",
    )

    return parser


def _configure_logging(verbosity: int, console: Console) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    elif verbosity < 0:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_paths(args: argparse.Namespace, config: CasebookConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _resolve_tags(args: argparse.Namespace, config: CasebookConfig) -> list[str]:
    tags = list(config.include_tags)
    if args.tags:
        tags.extend(args.tags)
    return tags


def _resolve_keyword(args: argparse.Namespace, config: CasebookConfig) -> str | None:
    return args.keyword or config.keyword


def _resolve_environment(args: argparse.Namespace, config: CasebookConfig) -> Environment:
    if args.environment:
        return parse_environment(args.environment)
    return config.environment


def _resolve_verbosity(args: argparse.Namespace, config: CasebookConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace,
    config: CasebookConfig,
    verbosity: int,
    console: Console | None = None,
) -> list[Reporter]:
    """Instantiate reporters from the CLI, then config, then the default."""
    names = getattr(args, "reporters", None) or config.reporters or [DEFAULT_REPORTER]

    options: dict[str, dict[str, Any]] = {
        name: dict(config.reporter_options.get(name, {})) for name in names
    }
    reporters = resolve_reporters(names, options)

    for name, reporter in zip(names, reporters):
        if not isinstance(reporter, ConsoleReporter):
            continue
        if "verbosity" not in options[name]:
            reporter.verbosity = verbosity
        if console is not None:
            reporter.console = console
    return reporters


def _dispatch(args: argparse.Namespace, config: CasebookConfig, console: Console) -> int:
    verbosity = _resolve_verbosity(args, config)
    _configure_logging(verbosity, console)

    tags = _resolve_tags(args, config)
    keyword = _resolve_keyword(args, config)

    try:
        matcher = KeywordMatcher(keyword) if keyword else None
        runner = Runner(
            _resolve_paths(args, config),
            environment=_resolve_environment(args, config),
            pattern=args.pattern or config.pattern,
            console=console,
            print_report=config.print_report and not getattr(args, "no_report", False),
        )
    except (CasebookError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 2

    if args.command == "list":
        return _list_tests(runner, tags, matcher, console)

    reporters = _resolve_reporters(args, config, verbosity, console)
    reporter = reporters[0] if len(reporters) == 1 else ReporterGroup(reporters)

    asyncio.run(runner.run(RunOptions(tags=tags or None, keyword=keyword, reporter=reporter)))
    return 0 if runner.results.failed == 0 else 1


def _list_tests(
    runner: Runner,
    tags: list[str],
    matcher: KeywordMatcher | None,
    console: Console,
) -> int:
    count = 0
    for test_class in runner.test_classes:
        tests = runner.get_tests(test_class, tags, matcher)
        if not tests:
            continue
        console.print(f"[bold]{escape(test_class.name)}[/bold]")
        for descriptor in tests:
            console.print(f"  {escape(descriptor.display_name)}")
            count += 1
    console.print(f"{count} tests collected")
    return 0


__all__ = ["main"]
