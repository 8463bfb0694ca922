from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

import pytest

from generic_adapter import BuiltinType, Kind, OtherType, PointerType, Ref, Slice, SliceType, StructType
from generic_adapter.semantics.type_predicates import (
    is_assignable, type_is_int, type_is_pointer, type_is_slice, type_is_string, type_is_struct,
)
from generic_adapter.semantics.type_resolution import struct_fields, type_from_annotation, type_of_value
from generic_adapter.semantics.typesys import kind_of


@dataclass
class Shape:
    Name: str


@dataclass
class Circle(Shape):
    Radius: float = 1.0


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (int, BuiltinType.INT),
        (str, BuiltinType.STRING),
        (bool, BuiltinType.BOOL),
        (float, BuiltinType.FLOAT),
        (Any, BuiltinType.ANY),
        (list[int], SliceType(BuiltinType.INT)),
        (List[str], SliceType(BuiltinType.STRING)),
        (Sequence[float], SliceType(BuiltinType.FLOAT)),
        (tuple[int, ...], SliceType(BuiltinType.INT)),
        (list, SliceType(BuiltinType.ANY)),
        (Slice[int], SliceType(BuiltinType.INT)),
        (Ref[int], PointerType(BuiltinType.INT)),
        (Ref, PointerType(BuiltinType.ANY)),
        (Shape, StructType("Shape", Shape)),
        (bytes, OtherType("bytes", bytes)),
    ],
)
def test_type_from_annotation(annotation, expected):
    assert type_from_annotation(annotation) == expected


def test_descriptor_rendering():
    assert str(SliceType(PointerType(StructType("Shape", Shape)))) == "[]*Shape"
    assert str(BuiltinType.FLOAT) == "float64"


def test_kinds():
    assert kind_of(None) is Kind.INVALID
    assert kind_of(BuiltinType.NIL) is Kind.INVALID
    assert kind_of(BuiltinType.ANY) is Kind.ANY
    assert kind_of(SliceType(BuiltinType.INT)) is Kind.SLICE
    assert kind_of(PointerType(BuiltinType.INT)) is Kind.POINTER
    assert kind_of(StructType("Shape", Shape)) is Kind.STRUCT


def test_type_predicates():
    assert type_is_struct(StructType("Shape", Shape))
    assert not type_is_struct(BuiltinType.INT)
    assert type_is_pointer(PointerType(BuiltinType.INT))
    assert not type_is_pointer(None)
    assert type_is_slice(SliceType(BuiltinType.INT))
    assert type_is_int(BuiltinType.INT)
    assert type_is_string(BuiltinType.STRING)


def test_assignability():
    shape = StructType("Shape", Shape)
    circle = StructType("Circle", Circle)
    assert is_assignable(BuiltinType.INT, BuiltinType.INT)
    assert is_assignable(SliceType(BuiltinType.INT), BuiltinType.ANY)
    assert is_assignable(circle, shape)
    assert not is_assignable(shape, circle)
    assert not is_assignable(BuiltinType.INT, BuiltinType.FLOAT)


def test_descriptors_are_hashable():
    table = {SliceType(BuiltinType.INT): "ints", StructType("Shape", Shape): "shapes"}
    assert table[SliceType(BuiltinType.INT)] == "ints"
    assert table[type_of_value(Shape("x"))] == "shapes"


def test_struct_fields_order_and_inheritance():
    assert struct_fields(Circle) == (("Name", BuiltinType.STRING), ("Radius", BuiltinType.FLOAT))


def test_ref_behaviour():
    r = Ref(5)
    assert r.type == PointerType(BuiltinType.INT)
    assert not r.is_nil
    r.set(6)
    assert r.deref() == 6
    assert r != Ref(6)
    assert repr(Ref.nil(BuiltinType.STRING)) == "Ref(nil *string)"
    assert Ref().elem_type is BuiltinType.ANY
