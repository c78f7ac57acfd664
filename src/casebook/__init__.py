"""casebook - class-based unit testing with annotated test methods."""

from .context import current_test
from .errors import CasebookError, CollectionError, ConfigurationError
from .reports import BufferedReporter, ConsoleReporter, Reporter
from .testing import (
    Runner,
    RunOptions,
    after,
    after_all,
    after_each,
    before,
    before_all,
    before_each,
    client,
    collect,
    disabled,
    display_name,
    negated,
    negative_test,
    order,
    run,
    server,
    tag,
    test,
    timeout,
)
from .types import Annotation, Environment
from .version import __version__


__all__ = [
    # Annotations
    "test",
    "disabled",
    "display_name",
    "timeout",
    "order",
    "server",
    "client",
    "tag",
    "negated",
    "negative_test",
    "before",
    "before_each",
    "before_all",
    "after",
    "after_each",
    "after_all",
    # Running
    "Runner",
    "RunOptions",
    "collect",
    "run",
    "current_test",
    "Annotation",
    "Environment",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    "BufferedReporter",
    # Errors
    "CasebookError",
    "CollectionError",
    "ConfigurationError",
    "__version__",
]
