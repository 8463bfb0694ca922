"""Runtime value adapter for writing generic algorithms.

Every function takes an arbitrary value and works from its runtime shape:
classify it, strip one level of Ref indirection, build and extend typed
slices, look up struct fields by name, iterate over slices.

Indirection is single-level: indirect(Ref(Ref(x))) is Ref(x), not x.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from generic_adapter.internals import errors as er
from generic_adapter.internals.config import get_config
from generic_adapter.internals.report import Reporter, emit
from generic_adapter.semantics.typesys import Kind, Type, SliceType, kind_of
from generic_adapter.semantics.type_predicates import (
    type_is_struct, type_is_pointer, type_is_slice, is_assignable,
)
from generic_adapter.semantics.type_resolution import type_of_value, is_exported
from generic_adapter.values import Ref, Slice, zero_of

logger = logging.getLogger(__name__)


# === Classification ===

def classify(i: Any) -> Kind:
    """Kind of `i` as given, without indirection.

    Examples:
        >>> classify(3)
        <Kind.INT: 'int'>
        >>> classify(Ref(3))
        <Kind.POINTER: 'ptr'>
    """
    return kind_of(type_of_value(i))


def is_int(i: Any) -> bool:
    """True if `i`, or the value it points to, is an int (bool excluded)."""
    return classify(indirect(i)) is Kind.INT


def is_slice(i: Any) -> bool:
    """True if `i`, or the value it points to, is a slice."""
    return classify(indirect(i)) is Kind.SLICE


def is_ptr(i: Any) -> bool:
    return classify(i) is Kind.POINTER


is_pointer = is_ptr


def is_string(i: Any) -> bool:
    return classify(i) is Kind.STRING


def is_struct(i: Any) -> bool:
    """True if `i` itself is a struct; a Ref to a struct is not."""
    return type_is_struct(type_of_value(i))


def is_struct_ptr(i: Any) -> bool:
    if not is_ptr(i):
        return False
    return is_struct(indirect(i))


def is_struct_or_struct_ptr(i: Any) -> bool:
    return is_struct(indirect(i))


# === Verification guards ===

def verify_int(i: Any) -> None:
    """Require `i` to resolve to an int.

    Raises:
        VerificationError: if it does not (or exits, in strict mode).
    """
    if not is_int(i):
        _guard_failed("verify_int", "GA2001", i)


def verify_string(i: Any) -> None:
    """Require `i` to be a str.

    Raises:
        VerificationError: if it is not (or exits, in strict mode).
    """
    if not is_string(i):
        _guard_failed("verify_string", "GA2002", i)


def verify_slice(i: Any) -> None:
    """Guard on slice arguments.

    NOTE: the check is inverted relative to verify_int/verify_string: this
    guard fails when `i` IS a slice and passes for everything else.
    Callers depend on the current behavior; it is kept until the intended
    semantics are settled.

    Raises:
        VerificationError: if `i` is a slice (or exits, in strict mode).
    """
    if is_slice(i):
        _guard_failed("verify_slice", "GA2003", i)


def _guard_failed(origin: str, code: str, value: Any) -> None:
    details = dict(value=repr(value), type=type_of_value(value))
    logger.warning("%s failed: %s", origin, er.format_error(code, **details))

    cfg = get_config()
    if cfg.strict:
        reporter = Reporter(origin)
        emit(reporter, er.ERR[code], **details)
        reporter.print(use_color=cfg.use_color)
        raise SystemExit(2)
    er.raise_error(code, **details)


# === Resolution ===

def indirect(i: Any) -> Any:
    """Value that `i` points to, or `i` itself if it is not a Ref.

    A nil Ref resolves to the zero value of its pointee type.
    """
    if isinstance(i, Ref):
        if i.is_nil:
            return zero_of(i.elem_type)
        return i.deref()
    return i


def value_of(i: Any) -> Any:
    return indirect(i)


def type_of(i: Any) -> Type:
    """Descriptor of the resolved value of `i`.

    If the resolved value is itself a pointer (i was a Ref to a Ref), the
    pointer type is unwrapped once more to its element type.
    """
    typ = type_of_value(value_of(i))
    if type_is_pointer(typ):
        typ = typ.elem
    return typ


# === Slices ===

def make_slice(i: Any) -> Slice:
    """New empty slice for the exemplar `i`.

    If `i` resolves to a slice, the result has the same element type;
    otherwise the type of `i` becomes the element type.

    Examples:
        >>> make_slice(7)
        []int{}
        >>> make_slice([1, 2])
        []int{}
    """
    ut = type_of_value(indirect(i))
    if type_is_slice(ut):
        return make_slice_of(ut)
    return make_slice_of(SliceType(ut))


def make_slice_of(ty: Type) -> Slice:
    """New empty slice of slice type `ty` (e.g. from parse_type("[]int")).

    A non-slice descriptor is taken as the element type.
    """
    if isinstance(ty, SliceType):
        return Slice(ty.elem)
    return Slice(ty)


def append(ret: Any, k: Any) -> Slice:
    """Return a new slice holding `ret`'s elements followed by `k`.

    If `k` resolves to a slice, its elements are appended one by one;
    otherwise `k` is appended as a single element. Neither argument is
    modified.

    A Ref in `k` is appended as the pointer itself when the element type
    accepts it, otherwise the value it points to is appended. A nil Ref has
    no value to append and is rejected unless the element type accepts it.

    Raises:
        ContractError: `ret` is not a slice, or an element is not
            assignable to `ret`'s element type.
    """
    dest = value_of(ret)
    dest_type = type_of_value(dest)
    if not type_is_slice(dest_type):
        er.raise_error("GA3001", value=repr(ret), type=dest_type)
    elem = dest_type.elem

    if is_slice(k):
        extra = [_assignable_item(item, elem) for item in value_of(k)]
    else:
        extra = [_assignable_item(k, elem)]
    return Slice(elem, [*dest, *extra])


def _assignable_item(item: Any, elem: Type) -> Any:
    item_type = type_of_value(item)
    if is_assignable(item_type, elem):
        return item
    if isinstance(item, Ref) and not item.is_nil:
        target = value_of(item)
        if is_assignable(type_of_value(target), elem):
            return target
    er.raise_error("GA3002", type=item_type, elem=elem)


def foreach(i: Any, fn: Callable[[int, Any], bool]) -> None:
    """Call fn(index, element) for each element of `i`, iff `i` is a slice.

    Iteration stops as soon as `fn` returns a falsy value. A non-slice `i`
    is silently ignored.
    """
    val = value_of(i)
    if not type_is_slice(type_of_value(val)):
        return
    # The bound is the length at entry; fn may grow or shrink a live list.
    n = len(val)
    for index in range(n):
        if index >= len(val):
            break
        if not fn(index, val[index]):
            break


# === Fields ===

@dataclass(frozen=True)
class FieldLookup:
    """Outcome of lookup_field: the value, or the reason there is none."""
    value: Any
    error: Optional[er.GenericAdapterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def lookup_field(i: Any, name: str) -> FieldLookup:
    """Look up the exported field `name` on a struct or Ref to a struct.

    On failure the returned value is zero(i), and `error` is a
    NotAStructError or UnknownFieldError.

    Examples:
        >>> lookup_field(Point(1, 2), "X").value
        1
        >>> lookup_field(Point(1, 2), "Z").ok
        False
    """
    if not is_struct_or_struct_ptr(i):
        return FieldLookup(zero(i), er.make_error("GA1001"))

    struct = value_of(i)
    if not is_exported(name) or type_of_value(struct).get_field_type(name) is None:
        return FieldLookup(zero(i), er.make_error("GA1002"))
    return FieldLookup(getattr(struct, name))


def field(i: Any, name: str) -> Any:
    """Named field of struct (or Ref to struct) `i`.

    All errors are silently reported by returning zero(i); use lookup_field
    to tell a missing field apart from a zero-valued one.
    """
    result = lookup_field(i, name)
    if not result.ok:
        logger.debug("field %r of %s: %s", name, type_of(i), result.error.message)
    return result.value


def zero(i: Any) -> Any:
    """Zero value of type_of(i)."""
    return zero_of(type_of(i))


__all__ = [
    "classify",
    "is_int",
    "is_slice",
    "is_ptr",
    "is_pointer",
    "is_string",
    "is_struct",
    "is_struct_ptr",
    "is_struct_or_struct_ptr",
    "verify_int",
    "verify_string",
    "verify_slice",
    "indirect",
    "value_of",
    "type_of",
    "make_slice",
    "make_slice_of",
    "append",
    "foreach",
    "FieldLookup",
    "lookup_field",
    "field",
    "zero",
]
