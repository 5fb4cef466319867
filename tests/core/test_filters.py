"""Tests for built-in filters and delegates."""

import re

from extendthis.core import Delegate, FilterContext, bind_to, delegate_filter, exclude_name_filter


class Engine:
    runs = 0

    def start(self):
        return self

    @staticmethod
    def version():
        return 2

    @classmethod
    def owner(cls):
        return cls


def _ctx(key, value, source=None):
    return FilterContext(target={}, source=source, source_key=key, source_value=value, target_key=key)


def test_exclude_name_filter():
    private = exclude_name_filter(r"^_")

    assert private(_ctx("_secret", 1)) is False
    assert private(_ctx("public", 1)) is True


def test_exclude_name_filter_accepts_compiled_pattern():
    assert exclude_name_filter(re.compile("x$"))(_ctx("max", 1)) is False


def test_bind_plain_function_from_class():
    bound = bind_to(Engine.__dict__["start"], Engine)

    assert bound() is Engine


def test_bind_static_and_class_methods():
    engine = Engine()

    assert bind_to(Engine.__dict__["version"], Engine)() == 2
    assert bind_to(Engine.__dict__["owner"], engine)() is Engine


def test_bound_methods_kept():
    engine = Engine()

    assert bind_to(engine.start, engine)() is engine


def test_functions_from_mappings_not_rebound():
    def greet():
        return "hi"

    assert bind_to(greet, {"greet": greet}) is greet


def test_non_functions_not_bound():
    assert bind_to(3, Engine) is None
    assert bind_to(Engine, Engine()) is None


def test_delegate_filter_wraps_functions():
    engine = Engine()
    ctx = _ctx("start", engine.start, engine)

    assert delegate_filter(ctx) is True
    assert isinstance(ctx.source_value, Delegate)
    assert ctx.source_value() is engine


def test_delegate_filter_keeps_values():
    ctx = _ctx("runs", 0, Engine())

    assert delegate_filter(ctx) is True
    assert ctx.source_value == 0


def test_delegate_keeps_receiver_on_classes():
    """A delegate attached to a class is not rebound to the instance."""
    engine = Engine()

    class Car:
        pass

    Car.start = Delegate(engine.start, engine)

    assert Car().start() is engine
