"""Fan-out of run events to several reporters."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from typing import Any

from casebook.reports.base import OPTIONAL_CALLBACKS, Reporter

logger = logging.getLogger(__name__)


class ReporterGroup:
    """Forward every event to each member reporter, in order.

    A member that raises is logged and skipped; the others still receive
    the event.
    """

    def __init__(self, reporters: Iterable[Reporter]) -> None:
        self.reporters = list(reporters)

    async def on_run_start(self, total_classes: int) -> None:
        await self._dispatch("on_run_start", total_classes)

    async def on_run_end(self, elapsed: float) -> None:
        await self._dispatch("on_run_end", elapsed)

    def get_report(self) -> str:
        reports = []
        for reporter in self.reporters:
            get_report = getattr(reporter, "get_report", None)
            if get_report is not None:
                reports.append(get_report())
        return "\n".join(reports)

    def __getattr__(self, event: str) -> Callable[..., Any]:
        if event not in OPTIONAL_CALLBACKS:
            raise AttributeError(event)

        async def forward(*args: Any) -> None:
            await self._dispatch(event, *args)

        return forward

    async def _dispatch(self, event: str, *args: Any) -> None:
        for reporter in self.reporters:
            callback = getattr(reporter, event, None)
            if callback is None:
                continue
            try:
                outcome = callback(*args)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.warning("Reporter %s failed in %s", type(reporter).__name__, event, exc_info=True)


__all__ = ["ReporterGroup"]
