"""Type checking predicates over runtime type descriptors.

These work on descriptors only; the value-level predicates in
generic_adapter.reflect resolve a value to a descriptor first and then
defer to the functions here.
"""

from typing import Optional
from generic_adapter.semantics.typesys import Type, BuiltinType, Kind, StructType, kind_of


def type_is_struct(ty: Optional[Type]) -> bool:
    """Check if a type is a struct type.

    Examples:
        >>> type_is_struct(BuiltinType.INT)
        False
    """
    return kind_of(ty) is Kind.STRUCT


def type_is_pointer(ty: Optional[Type]) -> bool:
    """Check if a type is a pointer type.

    None is accepted and is not a pointer.

    Examples:
        >>> type_is_pointer(None)
        False
        >>> type_is_pointer(PointerType(BuiltinType.INT))
        True
    """
    return ty is not None and kind_of(ty) is Kind.POINTER


def type_is_slice(ty: Optional[Type]) -> bool:
    return kind_of(ty) is Kind.SLICE


def type_is_int(ty: Optional[Type]) -> bool:
    return ty is BuiltinType.INT


def type_is_string(ty: Optional[Type]) -> bool:
    return ty is BuiltinType.STRING


def is_assignable(value_type: Type, target: Type) -> bool:
    """Check if a value of `value_type` may be stored where `target` is expected.

    Rules:
    - Anything is assignable to `any`
    - Identical types are assignable
    - A struct is assignable to the struct type of one of its base classes

    Examples:
        >>> is_assignable(BuiltinType.INT, BuiltinType.ANY)
        True
        >>> is_assignable(BuiltinType.BOOL, BuiltinType.INT)
        False
    """
    if target is BuiltinType.ANY:
        return True
    if value_type == target:
        return True
    if isinstance(value_type, StructType) and isinstance(target, StructType):
        return issubclass(value_type.py_type, target.py_type)
    return False
