"""Shared types for the casebook testing framework."""

from enum import Enum


DEFAULT_ORDER = 999


class Annotation(Enum):
    """Lifecycle hook kinds."""

    BEFORE_EACH = "BeforeEach"
    BEFORE_ALL = "BeforeAll"
    AFTER_EACH = "AfterEach"
    AFTER_ALL = "AfterAll"


class MetadataKind(Enum):
    """Kinds of metadata the registry keeps per class."""

    TEST_LIST = "test_list"
    ANNOTATIONS = "annotations"
    CLASS_METADATA = "class_metadata"


class Environment(Enum):
    """Execution context a test may be restricted to."""

    SERVER = "Server"
    CLIENT = "Client"
