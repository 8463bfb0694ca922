"""Lark parser for type expressions.

Type expressions use the same syntax that descriptors render with str(),
so for any descriptor the parser can produce:

    parse_type(str(ty), structs) == ty
"""
from __future__ import annotations

import dataclasses
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional, Union

from lark import Lark, Token, Tree, UnexpectedInput

from generic_adapter.internals import errors as er
from generic_adapter.semantics.typesys import (
    Type, SliceType, PointerType, StructType, BUILTIN_NAMES, BUILTIN_ALIASES,
)
from generic_adapter.semantics.type_resolution import struct_type_of

GRAMMAR_PATH = Path(__file__).parent.parent / "grammar.lark"

StructTable = Mapping[str, Union[type, StructType]]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark.open(str(GRAMMAR_PATH), parser="lalr", lexer="basic")


def parse_type(text: str, structs: Optional[StructTable] = None) -> Type:
    """Parse a type expression into a descriptor.

    Args:
        text: Expression such as "int", "[]string" or "[]*Point".
        structs: Struct names usable in the expression, mapped to their
            dataclass (or an existing StructType).

    Returns:
        The descriptor for `text`.

    Raises:
        TypeSyntaxError: `text` is not a well-formed type expression.
        UnknownTypeError: `text` names a type that is neither builtin nor in `structs`.

    Examples:
        >>> parse_type("[]int")
        SliceType(elem=<BuiltinType.INT: 'int'>)
    """
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as e:
        column = getattr(e, "column", None)
        if not isinstance(column, int) or column < 1:
            column = len(text) + 1
        raise er.make_error("GA4001", text=text, column=column) from e
    return _build(tree, structs or {})


def _build(node: Union[Tree, Token], structs: StructTable) -> Type:
    if isinstance(node, Token):
        return _resolve_name(str(node), structs)
    if node.data == "slice_t":
        return SliceType(_build(node.children[0], structs))
    if node.data == "pointer_t":
        return PointerType(_build(node.children[0], structs))
    if node.data == "name_t":
        return _resolve_name(str(node.children[0]), structs)
    raise er.make_error("GA4001", text=str(node), column=1)


def _resolve_name(name: str, structs: StructTable) -> Type:
    builtin = BUILTIN_NAMES.get(name) or BUILTIN_ALIASES.get(name)
    if builtin is not None:
        return builtin

    # Qualified names fall back to their last segment: "geo.Point" → "Point"
    entry = structs.get(name)
    if entry is None and "." in name:
        entry = structs.get(name.rsplit(".", 1)[1])
    if isinstance(entry, StructType):
        return entry
    if isinstance(entry, type) and dataclasses.is_dataclass(entry):
        return struct_type_of(entry)
    raise er.make_error("GA4002", name=name)
