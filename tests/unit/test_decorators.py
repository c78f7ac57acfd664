"""Tests for casebook.testing.decorators."""

import pytest

import casebook as cb
from casebook.errors import ConfigurationError
from casebook.testing.metadata import MetadataRegistry, get_marks, get_registry
from casebook.types import Annotation, Environment


def test_method_decorators_return_the_function_unchanged():
    def check(self):
        return "ok"

    decorated = cb.test(cb.order(2)(check))

    assert decorated is check
    assert len(get_marks(check)) == 2


def test_stacked_decorators_build_one_descriptor():
    class Stacked:
        @cb.test
        @cb.order(2)
        @cb.tag("fast", "smoke")
        @cb.timeout(250)
        @cb.server
        @cb.negated
        def check(self):
            pass

    registry = get_registry()
    registry.bind(Stacked)
    options = registry.get_test(Stacked, "check").options

    assert options.is_a_test is True
    assert options.order == 2
    assert options.tags == {"fast", "smoke"}
    assert options.timeout_ms == 250
    assert options.environment is Environment.SERVER
    assert options.negated is True


def test_first_applied_value_wins():
    class Named:
        @cb.test
        @cb.display_name("outer")
        @cb.display_name("inner")
        def check(self):
            pass

    registry = get_registry()
    registry.bind(Named)

    # Decorators apply bottom-up, so "inner" is set first.
    assert registry.get_test(Named, "check").options.display_name == "inner"


def test_stacked_tag_decorators_keep_the_first_applied():
    class Retagged:
        @cb.test
        @cb.tag("a")
        @cb.tag("b")
        def check(self):
            pass

    registry = MetadataRegistry()
    registry.bind(Retagged)

    assert registry.get_test(Retagged, "check").options.tags == {"b"}


def test_class_decorators_record_marks_until_bound():
    @cb.display_name("Pretty name")
    @cb.tag("integration")
    class Decorated:
        @cb.before_all
        def prepare(self):
            pass

        @cb.test
        def check(self):
            pass

    registry = MetadataRegistry()
    assert not registry.is_bound(Decorated)
    assert registry.get_class_metadata(Decorated) is None

    registry.bind(Decorated)

    metadata = registry.get_class_metadata(Decorated)
    assert metadata.display_name == "Pretty name"
    assert metadata.tags == {"integration"}
    assert [h.name for h in registry.get_annotation(Decorated, Annotation.BEFORE_ALL)] == ["prepare"]
    assert [d.name for d in registry.get_tests(Decorated)] == ["check"]


def test_class_marks_bind_into_every_registry():
    @cb.tag("outer")
    @cb.tag("inner")
    class Tagged:
        @cb.test
        def check(self):
            pass

    first, second = MetadataRegistry(), MetadataRegistry()
    first.bind(Tagged)
    second.bind(Tagged)

    assert first.get_class_metadata(Tagged).tags == {"inner"}
    assert second.get_class_metadata(Tagged).tags == {"inner"}


def test_class_marks_are_not_inherited():
    @cb.display_name("Base")
    class Base:
        @cb.test
        def check(self):
            pass

    class Child(Base):
        @cb.test
        def other(self):
            pass

    registry = MetadataRegistry()
    registry.bind(Child)

    assert registry.get_class_metadata(Child) is None


def test_class_level_test_options_are_rejected():
    with pytest.raises(ConfigurationError, match="only display_name and tag"):

        @cb.timeout(100)
        class TimedClass:
            pass


def test_class_level_lifecycle_annotation_is_rejected():
    with pytest.raises(ConfigurationError, match="use it on a method"):

        @cb.before_each
        class HookClass:
            pass


def test_apply_to_undefined_class_raises_immediately():
    with pytest.raises(ConfigurationError, match="undefined class"):
        cb.test.apply(None, "check")


def test_decorating_a_non_callable_raises():
    with pytest.raises(ConfigurationError):
        cb.test(42)
    with pytest.raises(ConfigurationError):
        cb.tag("x")(None)


def test_explicit_apply_without_decorator_syntax():
    class Plain:
        def check(self):
            pass

        def reset(self):
            pass

    registry = MetadataRegistry()
    cb.test.apply(Plain, "check", registry=registry)
    cb.order(4).apply(Plain, "check", registry=registry)
    cb.before_each.apply(Plain, "reset", registry=registry)
    cb.display_name("Plain tests").apply(Plain, registry=registry)

    descriptor = registry.get_test(Plain, "check")
    assert descriptor.options.is_a_test is True
    assert descriptor.options.order == 4
    assert [h.name for h in registry.get_annotation(Plain, Annotation.BEFORE_EACH)] == ["reset"]
    assert registry.get_class_metadata(Plain).display_name == "Plain tests"


def test_disabled_bare_and_with_message():
    class Disabled:
        @cb.test
        @cb.disabled
        def bare(self):
            pass

        @cb.test
        @cb.disabled("pending")
        def with_message(self):
            pass

    registry = get_registry()
    registry.bind(Disabled)

    bare = registry.get_test(Disabled, "bare").options
    assert bare.is_disabled
    assert bare.disabled.message is None
    assert registry.get_test(Disabled, "with_message").options.disabled.message == "pending"


def test_invalid_option_values_fail_at_annotation_time():
    with pytest.raises(ConfigurationError):
        cb.timeout(0)


def test_aliases_share_the_lifecycle_kind():
    assert cb.before.kind is Annotation.BEFORE_EACH
    assert cb.after.kind is Annotation.AFTER_EACH
    assert cb.negative_test is cb.negated


def test_client_restriction():
    class ClientOnly:
        @cb.test
        @cb.client
        def check(self):
            pass

    registry = get_registry()
    registry.bind(ClientOnly)
    assert registry.get_test(ClientOnly, "check").options.environment is Environment.CLIENT
