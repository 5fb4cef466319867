"""Tests for property access over mappings and objects."""

from abc import ABC, abstractmethod
from types import SimpleNamespace
from typing import Protocol

import pytest

from extendthis.core.properties import (
    bind_class_attribute,
    enumerable_keys,
    get_property,
    has_property,
    own_attributes,
    set_property,
)


class Animal:
    legs = 4

    def walk(self):
        return "walking"


class Cat(Animal):
    def __init__(self):
        self._name = "tom"

    @staticmethod
    def species():
        return "felis"

    @property
    def sound(self):
        return "meow"


def test_mapping_keys_in_insertion_order():
    assert enumerable_keys({"b": 1, "a": 2, 3: "skipped"}) == ["b", "a"]


def test_instance_keys_own_first_then_inherited():
    keys = enumerable_keys(Cat())

    assert keys[0] == "_name"
    assert set(keys) == {"_name", "species", "sound", "legs", "walk"}


def test_class_keys_follow_mro_without_dunders():
    keys = enumerable_keys(Cat)

    assert set(keys) == {"species", "sound", "legs", "walk"}
    assert keys.index("species") < keys.index("walk")
    assert not any(key.startswith("__") for key in keys)


def test_has_property_includes_inherited():
    cat = Cat()

    assert has_property(cat, "walk")
    assert has_property(Cat, "legs")
    assert not has_property(cat, "fly")
    assert has_property({"a": None}, "a")
    assert not has_property({"a": None}, "b")


def test_class_attributes_read_raw():
    """Descriptors read from a class can be attached to another class."""
    assert isinstance(get_property(Cat, "species"), staticmethod)
    assert isinstance(get_property(Cat, "sound"), property)


def test_abc_and_protocol_bookkeeping_skipped():
    class Shape(ABC):
        @abstractmethod
        def area(self): ...

    class Square(Shape):
        def area(self):
            return 1

    class Sized(Protocol):
        def size(self) -> int: ...

    assert enumerable_keys(Square()) == ["area"]
    protocol_keys = enumerable_keys(Sized)
    assert "size" in protocol_keys
    assert not {"_abc_impl", "_is_protocol", "_is_runtime_protocol"} & set(protocol_keys)


def test_bind_class_attribute_to_instance():
    cat = Cat()

    walk = bind_class_attribute(get_property(Cat, "walk"), cat)
    species = bind_class_attribute(get_property(Cat, "species"), cat)
    prop = get_property(Cat, "sound")

    assert walk.__self__ is cat
    assert walk() == "walking"
    assert species() == "felis"
    assert bind_class_attribute(prop, cat) is prop
    assert bind_class_attribute(4, cat) == 4


def test_instance_properties_evaluated():
    assert get_property(Cat(), "sound") == "meow"


def test_missing_property_raises():
    with pytest.raises(KeyError):
        get_property({}, "a")
    with pytest.raises(AttributeError):
        get_property(Cat(), "fly")


def test_set_property_on_mapping_and_object():
    mapping: dict = {}
    namespace = SimpleNamespace()

    set_property(mapping, "a", 1)
    set_property(namespace, "a", 1)

    assert mapping == {"a": 1}
    assert namespace.a == 1


def test_own_attributes_snapshot():
    assert own_attributes(Cat()) == {"_name": "tom"}
