"""Tests for cycle-safe stringify used in error messages."""

from extendthis.core import stringify


class Tagged:
    def __init__(self):
        self._name = "ralph"
        self.callback = lambda: None


class WithMethods:
    count = 1

    def bark(self):
        return "woof"

    @property
    def sound(self):
        return "woof"


def test_scalars_render_as_json():
    assert stringify("owner") == '"owner"'
    assert stringify(None) == "null"
    assert stringify(3) == "3"
    assert stringify([]) == "[]"


def test_self_reference_is_omitted():
    """CRITICAL: Cyclic objects render instead of recursing forever."""
    source = {"value": True}
    source["self"] = source

    assert stringify(source) == '{"value":true}'


def test_shared_container_rendered_once():
    child = {"a": 1}

    assert stringify({"x": child, "y": child}) == '{"x":{"a":1}}'


def test_object_renders_own_data_attributes():
    assert stringify(Tagged()) == '{"_name":"ralph"}'


def test_class_renders_data_without_behaviour():
    assert stringify(WithMethods) == '{"count":1}'


def test_top_level_callable_named():
    def helper():
        pass

    rendered = stringify(helper)

    assert rendered.startswith("<callable ")
    assert "helper" in rendered


def test_unknown_values_fall_back_to_str():
    assert stringify({"data": b"x"}) == "{\"data\":\"b'x'\"}"
