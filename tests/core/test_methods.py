"""Tests for the method registry and built-in methods."""

from functools import partial

import pytest

from extendthis.core import (
    CallScope,
    IllegalArgumentError,
    MethodRegistry,
    delegate_filter,
    delegate_method,
    make_call_method,
    mixin_method,
    parse_method_args,
)


class Pet:
    def __init__(self, name, color="red"):
        self._name = name
        self._color = color

    def name(self):
        return self._name


class Person:
    def __init__(self, height):
        self.height(height)

    def height(self, height=None):
        if height is not None:
            self._height = height
        return self._height


@pytest.fixture
def parse_args(selectors, reporter):
    return partial(parse_method_args, selectors=selectors, reporter=reporter)


@pytest.fixture
def call_method(reporter):
    return make_call_method(reporter)


def test_register_get_set_remove():
    registry = MethodRegistry()

    def handler(target, parse_args, args):
        return parse_args(args)

    assert registry.register("func_a", handler) is handler
    assert registry.register("func_a") is handler
    assert registry.names() == ["func_a"]
    assert registry.register("func_a", None) is None
    assert registry.items() == []


def test_mixin_adds_no_filters(parse_args):
    params = mixin_method({}, parse_args, [{"a": 1}])

    assert params.filters == []
    assert params.source_keys == {"a": "a"}


def test_delegate_wraps_user_filters(parse_args):
    def user_filter(ctx):
        return True

    params = delegate_method({}, parse_args, [{"a": 1}, user_filter])

    assert len(params.filters) == 3
    assert params.filters[1] is user_filter
    assert params.filters[2] is delegate_filter


class TestCallMethod:
    def test_class_initialized_against_scope(self, call_method, parse_args):
        target = object()

        params = call_method(target, parse_args, [Pet, "ralph", "blue"])

        assert params.source == {"_name": "ralph", "_color": "blue"}
        assert params.source_keys == {"_name": "_name", "_color": "_color"}

    def test_group_form_passes_selectors(self, call_method, parse_args):
        params = call_method(object(), parse_args, [[Pet, "ralph"], "_color"])

        assert params.source_keys == {"_color": "_color"}

    def test_plain_function_called_with_scope(self, call_method, parse_args):
        def build(scope, size):
            scope.size = size

        params = call_method({}, parse_args, [build, 3])

        assert params.source == {"size": 3}

    @pytest.mark.parametrize("args", [[], [{"a": 1}], ["a"], [[1, 2]]])
    def test_first_argument_must_be_callable(self, call_method, parse_args, args):
        with pytest.raises(IllegalArgumentError, match="first argument must be a function"):
            call_method({}, parse_args, args)

    def test_target_untouched_by_call(self, call_method, parse_args):
        target = {}

        call_method(target, parse_args, [Pet, "ralph"])

        assert target == {}


class TestCallScope:
    def test_reads_fall_back_to_target(self):
        scope = CallScope({"greeting": "hi"})

        assert scope.greeting == "hi"
        with pytest.raises(AttributeError):
            scope.missing  # noqa: B018

    def test_writes_stay_on_scope(self):
        target = Pet("ralph")
        scope = CallScope(target)

        scope._name = "fred"

        assert target._name == "ralph"
        assert scope.harvest() == {"_name": "fred"}

    def test_target_methods_rebound_to_scope(self):
        """Initializers can call methods already mixed into the target."""

        class Recruit:
            height = Person.height

        recruit = Recruit()
        scope = CallScope(recruit)

        Person.__init__(scope, 5)

        assert scope.harvest() == {"_height": 5}
        assert not hasattr(recruit, "_height")

    def test_class_target_functions_bound_to_scope(self):
        class Recruit:
            height = Person.height

        scope = CallScope(Recruit)
        scope.height(7)

        assert scope.harvest() == {"_height": 7}
