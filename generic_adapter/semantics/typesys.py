from __future__ import annotations
from enum import Enum
from typing import Optional, Union
from dataclasses import dataclass


class Kind(Enum):
    """Coarse shape of a value, used for branching."""
    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float64"
    STRING = "string"
    ANY = "interface"
    SLICE = "slice"
    STRUCT = "struct"
    POINTER = "ptr"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class BuiltinType(Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float64"
    STRING = "string"
    ANY = "any"
    NIL = "nil"

    def __str__(self) -> str:
        return self.value

    @property
    def kind(self) -> Kind:
        return _BUILTIN_KINDS[self]


_BUILTIN_KINDS = {
    BuiltinType.BOOL: Kind.BOOL,
    BuiltinType.INT: Kind.INT,
    BuiltinType.FLOAT: Kind.FLOAT,
    BuiltinType.STRING: Kind.STRING,
    BuiltinType.ANY: Kind.ANY,
    BuiltinType.NIL: Kind.INVALID,
}


@dataclass(frozen=True)
class SliceType:
    elem: "Type"  # The element type

    kind = Kind.SLICE

    def __str__(self) -> str:
        return f"[]{self.elem}"

    def __hash__(self) -> int:
        return hash(("slice", self.elem))

    def __eq__(self, other) -> bool:
        return isinstance(other, SliceType) and self.elem == other.elem


@dataclass(frozen=True)
class PointerType:
    """The type of a Ref.

    Only the pointee type is recorded; a nil Ref and a bound Ref of the same
    pointee share one PointerType.
    """
    elem: "Type"  # The type being pointed to

    kind = Kind.POINTER

    def __str__(self) -> str:
        return f"*{self.elem}"

    def __hash__(self) -> int:
        return hash(("pointer", self.elem))

    def __eq__(self, other) -> bool:
        return isinstance(other, PointerType) and self.elem == other.elem


@dataclass(frozen=True)
class StructType:
    """Represents a dataclass used as a struct.

    Fields are resolved on first access from the class annotations, so a
    struct may refer to itself through a Ref (e.g. a linked-list node).
    Field order follows dataclasses.fields().
    """
    name: str      # Class name (e.g., "Point")
    py_type: type  # The dataclass itself

    kind = Kind.STRUCT

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(("struct", self.py_type))

    def __eq__(self, other) -> bool:
        return isinstance(other, StructType) and self.py_type is other.py_type

    @property
    def fields(self) -> tuple[tuple[str, "Type"], ...]:
        from generic_adapter.semantics.type_resolution import struct_fields
        return struct_fields(self.py_type)

    def get_field_type(self, field_name: str) -> Optional["Type"]:
        """Get the type of a field by name, or None if field doesn't exist."""
        for name, ty in self.fields:
            if name == field_name:
                return ty
        return None

    def get_field_index(self, field_name: str) -> Optional[int]:
        """Get the index of a field by name, or None if field doesn't exist."""
        for i, (name, _) in enumerate(self.fields):
            if name == field_name:
                return i
        return None


@dataclass(frozen=True)
class OtherType:
    """Any Python type without a dedicated descriptor (bytes, dict, set, ...)."""
    name: str
    py_type: Optional[type] = None

    kind = Kind.OTHER

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(("other", self.name, self.py_type))

    def __eq__(self, other) -> bool:
        return isinstance(other, OtherType) and self.name == other.name and self.py_type is other.py_type


# Union type for all runtime type descriptors
Type = Union[BuiltinType, SliceType, PointerType, StructType, OtherType]


BUILTIN_NAMES = {t.value: t for t in BuiltinType if t is not BuiltinType.NIL}
# Accepted spellings in type expressions besides the canonical ones
BUILTIN_ALIASES = {
    "float": BuiltinType.FLOAT,
    "str": BuiltinType.STRING,
    "interface{}": BuiltinType.ANY,
}


def kind_of(ty: Optional[Type]) -> Kind:
    """Return the Kind of a descriptor; None (no type at all) is INVALID."""
    if ty is None:
        return Kind.INVALID
    return ty.kind
