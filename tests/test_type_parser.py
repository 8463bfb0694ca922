from __future__ import annotations

from dataclasses import dataclass

import pytest

from generic_adapter import (
    BuiltinType, PointerType, SliceType, StructType, TypeSyntaxError, UnknownTypeError, parse_type,
)


@dataclass
class Point:
    X: int
    Y: int


STRUCTS = {"Point": Point}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("int", BuiltinType.INT),
        ("string", BuiltinType.STRING),
        ("float64", BuiltinType.FLOAT),
        ("float", BuiltinType.FLOAT),
        ("any", BuiltinType.ANY),
        ("interface{}", BuiltinType.ANY),
        ("[]int", SliceType(BuiltinType.INT)),
        ("*string", PointerType(BuiltinType.STRING)),
        ("[][]bool", SliceType(SliceType(BuiltinType.BOOL))),
        ("[] * Point", SliceType(PointerType(StructType("Point", Point)))),
        ("geo.Point", StructType("Point", Point)),
    ],
)
def test_parse(text, expected):
    assert parse_type(text, STRUCTS) == expected


@pytest.mark.parametrize("text", ["[]*Point", "**int", "[][]string", "Point", "any"])
def test_render_parses_back(text):
    ty = parse_type(text, STRUCTS)
    assert str(ty) == text
    assert parse_type(str(ty), STRUCTS) == ty


def test_struct_table_accepts_descriptors():
    st = StructType("Point", Point)
    assert parse_type("*P", {"P": st}) == PointerType(st)


@pytest.mark.parametrize("text", ["", "[]", "[int]", "*", "int]"])
def test_syntax_errors(text):
    with pytest.raises(TypeSyntaxError) as exc_info:
        parse_type(text)
    assert exc_info.value.code == "GA4001"
    assert isinstance(exc_info.value, ValueError)


def test_unknown_name():
    with pytest.raises(UnknownTypeError, match="Point"):
        parse_type("[]Point")
