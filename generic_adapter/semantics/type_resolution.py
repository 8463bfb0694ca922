# semantics/type_resolution.py
"""
Resolution of Python values and annotations to runtime type descriptors.

Key Components:
- type_of_value(): descriptor of a value as-is (no pointer indirection)
- type_from_annotation(): descriptor of a dataclass field annotation
- struct_type_of() / struct_fields(): cached struct descriptors for dataclasses

Plain lists and tuples are treated as slices. Their element type is the
common type of their items, or `any` when they are empty or mixed.
"""
from __future__ import annotations

import collections.abc
import dataclasses
from functools import lru_cache
from typing import Any, Iterable, Tuple, get_args, get_origin, get_type_hints

from generic_adapter.semantics.typesys import (
    Type, BuiltinType, SliceType, PointerType, StructType, OtherType,
)
from generic_adapter.values import Ref, Slice

_SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)


def type_of_value(value: Any) -> Type:
    """Descriptor of `value` itself; a Ref yields a PointerType."""
    if value is None:
        return BuiltinType.NIL
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return BuiltinType.BOOL
    if isinstance(value, int):
        return BuiltinType.INT
    if isinstance(value, float):
        return BuiltinType.FLOAT
    if isinstance(value, str):
        return BuiltinType.STRING
    if isinstance(value, (Ref, Slice)):
        return value.type
    if isinstance(value, (list, tuple)):
        return SliceType(infer_elem_type(value))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return struct_type_of(type(value))
    cls = type(value)
    return OtherType(cls.__qualname__, cls)


def infer_elem_type(items: Iterable[Any]) -> Type:
    seen = {type_of_value(item) for item in items}
    if len(seen) == 1:
        return seen.pop()
    return BuiltinType.ANY


def type_from_annotation(annotation: Any) -> Type:
    """Map a Python annotation to a descriptor.

    Args:
        annotation: A resolved annotation (not a string), e.g. int, list[str],
            Ref[Point] or a dataclass class.

    Returns:
        The matching descriptor; unrecognised annotations become OtherType.
    """
    if annotation is Any:
        return BuiltinType.ANY
    if annotation is type(None) or annotation is None:
        return BuiltinType.NIL
    if annotation is bool:
        return BuiltinType.BOOL
    if annotation is int:
        return BuiltinType.INT
    if annotation is float:
        return BuiltinType.FLOAT
    if annotation is str:
        return BuiltinType.STRING
    if annotation in (list, tuple, Slice):
        return SliceType(BuiltinType.ANY)
    if annotation is Ref:
        return PointerType(BuiltinType.ANY)
    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return struct_type_of(annotation)

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Ref:
        return PointerType(type_from_annotation(args[0]))
    if origin is Slice or origin in _SEQUENCE_ORIGINS:
        return SliceType(type_from_annotation(args[0]) if args else BuiltinType.ANY)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return SliceType(type_from_annotation(args[0]))

    if isinstance(annotation, type):
        return OtherType(annotation.__qualname__, annotation)
    return OtherType(str(annotation))


@lru_cache(maxsize=None)
def struct_type_of(cls: type) -> StructType:
    return StructType(cls.__name__, cls)


@lru_cache(maxsize=None)
def struct_fields(cls: type, include_unexported: bool = False) -> Tuple[Tuple[str, Type], ...]:
    """Fields of a dataclass as (name, type) pairs, in declaration order.

    Names starting with an underscore are unexported and left out unless
    `include_unexported` is set.
    """
    try:
        hints = get_type_hints(cls)
    except NameError:
        # Forward reference to a name that is not importable from the
        # class's module (e.g. a class defined inside a function).
        hints = {}

    out = []
    for f in dataclasses.fields(cls):
        if not include_unexported and not is_exported(f.name):
            continue
        annotation = hints.get(f.name, f.type)
        if isinstance(annotation, str):
            out.append((f.name, OtherType(annotation)))
        else:
            out.append((f.name, type_from_annotation(annotation)))
    return tuple(out)


def is_exported(name: str) -> bool:
    return bool(name) and not name.startswith("_")
