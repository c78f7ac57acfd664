"""Class-based test discovery, scheduling and execution.

Provides the annotation decorators, the metadata registry they write to,
the collector and the runner.
"""

from .collector import TestClass, collect
from .decorators import (
    Decorator,
    after,
    after_all,
    after_each,
    before,
    before_all,
    before_each,
    client,
    disabled,
    display_name,
    negated,
    negative_test,
    order,
    server,
    tag,
    test,
    timeout,
)
from .descriptors import ClassMetadata, DisabledInfo, TestDescriptor, TestOptions
from .metadata import MetadataRegistry, get_registry
from .results import RunResults, TestCaseResult, TestStatus
from .runner import RunOptions, Runner, run


__all__ = [
    "ClassMetadata",
    "Decorator",
    "DisabledInfo",
    "MetadataRegistry",
    "RunOptions",
    "RunResults",
    "Runner",
    "TestCaseResult",
    "TestClass",
    "TestDescriptor",
    "TestOptions",
    "TestStatus",
    "after",
    "after_all",
    "after_each",
    "before",
    "before_all",
    "before_each",
    "client",
    "collect",
    "disabled",
    "display_name",
    "get_registry",
    "negated",
    "negative_test",
    "order",
    "run",
    "server",
    "tag",
    "test",
    "timeout",
]
