"""Pointer and slice values.

Python has neither pointers nor typed sequences, so two small value classes
stand in for them:

- Ref: a mutable one-slot box that knows the type it points to. Ref.nil(T)
  is a pointer that addresses nothing.
- Slice: an immutable sequence that knows its element type, so an empty
  Slice still says what it would hold.
"""
from __future__ import annotations

import collections.abc
import dataclasses
from typing import Any, FrozenSet, Generic, Iterable, Iterator, List, Optional, TypeVar

from generic_adapter.semantics.typesys import (
    Type, BuiltinType, SliceType, PointerType, StructType,
)

T = TypeVar("T")


class Ref(Generic[T]):
    """A pointer to a value.

    Two Refs are equal only if they are the same object, like two pointers
    are equal only if they hold the same address.
    """

    __slots__ = ("_target", "_elem")

    def __init__(self, target: Optional[T] = None, elem_type: Optional[Type] = None) -> None:
        if elem_type is None:
            if target is None:
                elem_type = BuiltinType.ANY
            else:
                from generic_adapter.semantics.type_resolution import type_of_value
                elem_type = type_of_value(target)
        self._target = target
        self._elem = elem_type

    @classmethod
    def nil(cls, elem_type: Type) -> "Ref":
        return cls(None, elem_type)

    @property
    def is_nil(self) -> bool:
        return self._target is None

    @property
    def elem_type(self) -> Type:
        return self._elem

    @property
    def type(self) -> PointerType:
        return PointerType(self._elem)

    def deref(self) -> Optional[T]:
        return self._target

    def set(self, value: T) -> None:
        self._target = value

    def __repr__(self) -> str:
        if self.is_nil:
            return f"Ref(nil {self.type})"
        return f"Ref({self._target!r})"


class Slice(collections.abc.Sequence, Generic[T]):
    """An immutable, element-typed sequence.

    A Slice compares equal to another Slice with the same element type and
    items, and to a list or tuple with the same items.
    """

    __slots__ = ("_items", "_elem")

    def __init__(self, elem_type: Type, items: Iterable[T] = ()) -> None:
        self._elem = elem_type
        self._items = tuple(items)

    @property
    def elem_type(self) -> Type:
        return self._elem

    @property
    def type(self) -> SliceType:
        return SliceType(self._elem)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Slice(self._elem, self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, Slice):
            return self._elem == other._elem and self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    __hash__ = None  # equal to lists, which are unhashable

    def to_list(self) -> List[T]:
        return list(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(repr(item) for item in self._items)
        return f"{self.type}{{{inner}}}"


_BUILTIN_ZEROS = {
    BuiltinType.BOOL: False,
    BuiltinType.INT: 0,
    BuiltinType.FLOAT: 0.0,
    BuiltinType.STRING: "",
    BuiltinType.ANY: None,
    BuiltinType.NIL: None,
}


def zero_of(ty: Optional[Type]) -> Any:
    """Return the zero value for a type descriptor.

    Never raises. Structs are built without calling __init__ or
    __post_init__, with every field set to the zero of its own type.
    A field whose struct type is already being built (``Left: Tree`` inside
    Tree) is set to None. OtherType and None have no meaningful zero and
    yield None.
    """
    return _zero(ty, frozenset())


def _zero(ty: Optional[Type], building: FrozenSet[StructType]) -> Any:
    if isinstance(ty, BuiltinType):
        return _BUILTIN_ZEROS[ty]
    if isinstance(ty, SliceType):
        return Slice(ty.elem)
    if isinstance(ty, PointerType):
        return Ref.nil(ty.elem)
    if isinstance(ty, StructType):
        if ty in building:
            return None
        return _zero_struct(ty, building | {ty})
    return None


def _zero_struct(ty: StructType, building: FrozenSet[StructType]) -> Any:
    from generic_adapter.semantics.type_resolution import struct_fields

    field_types = dict(struct_fields(ty.py_type, include_unexported=True))
    obj = object.__new__(ty.py_type)
    for f in dataclasses.fields(ty.py_type):
        # object.__setattr__ also works on frozen dataclasses
        object.__setattr__(obj, f.name, _zero(field_types.get(f.name), building))
    return obj
