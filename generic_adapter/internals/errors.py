# internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Severity(str, Enum):
    ERROR = "error"


class Category(str, Enum):
    GENERAL  = "general"
    FIELD    = "field"
    GUARD    = "guard"
    CONTRACT = "contract"
    SYNTAX   = "syntax"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


#
# --- Exceptions
#

class GenericAdapterError(Exception):
    """Base class for every error raised by generic_adapter.

    Each instance carries the catalog code it was built from, so callers can
    branch on ``exc.code`` instead of matching message text.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class NotAStructError(GenericAdapterError, TypeError):
    pass


class UnknownFieldError(GenericAdapterError, AttributeError):
    pass


class VerificationError(GenericAdapterError, TypeError):
    pass


class ContractError(GenericAdapterError, TypeError):
    pass


class TypeSyntaxError(GenericAdapterError, ValueError):
    pass


class UnknownTypeError(GenericAdapterError, ValueError):
    pass


_CATEGORY_EXCEPTIONS = {
    Category.GUARD: VerificationError,
    Category.CONTRACT: ContractError,
}

_CODE_EXCEPTIONS: Dict[str, type] = {}


def make_error(code: str, **kwargs) -> GenericAdapterError:
    """Build (but do not raise) the exception registered for ``code``.

    Args:
        code: Error code (e.g., "GA1001")
        **kwargs: Format parameters for the error message

    Returns:
        An instance of the exception class bound to ``code``, or of
        GenericAdapterError when the code has no dedicated class.
    """
    text = format_error(code, **kwargs)
    exc_type = _CODE_EXCEPTIONS.get(code)
    if exc_type is None:
        exc_type = _CATEGORY_EXCEPTIONS.get(_get(code).category) or GenericAdapterError
    return exc_type(code, text)


def raise_error(code: str, **kwargs) -> None:
    """Raise the exception registered for ``code``.

    Raises:
        GenericAdapterError: Always; the concrete subclass depends on the code.
    """
    raise make_error(code, **kwargs)


def format_error(code: str, **kwargs) -> str:
    return _fmt(code, **kwargs)


#
# --- Helpers
#

def _add(msg: ErrorMessage, exc_type: Optional[type] = None) -> ErrorMessage:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg
    if exc_type is not None:
        _CODE_EXCEPTIONS[msg.code] = exc_type
    return msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Field lookup - GA1xxx range
ERR_NOT_A_STRUCT = _add(ErrorMessage("GA1001", Severity.ERROR,
    "argument does not reference a struct",
    Category.FIELD, "Field lookup needs a dataclass instance or a Ref to one."),
    NotAStructError)

ERR_UNKNOWN_FIELD = _add(ErrorMessage("GA1002", Severity.ERROR,
    "struct has no field of the given name",
    Category.FIELD, "Field names are case-sensitive; names starting with '_' are unexported."),
    UnknownFieldError)

# Verification guards - GA2xxx range
_add(ErrorMessage("GA2001", Severity.ERROR,
    "int parameter required, not {value} ({type})",
    Category.GUARD, "verify_int was given a value that does not resolve to an int."))

_add(ErrorMessage("GA2002", Severity.ERROR,
    "string parameter required, not {value} ({type})",
    Category.GUARD, "verify_string was given a value that is not a str."))

_add(ErrorMessage("GA2003", Severity.ERROR,
    "slice parameter rejected: {value} ({type})",
    Category.GUARD, "verify_slice fails when its argument IS a slice (inverted guard)."))

# Append contract - GA3xxx range
_add(ErrorMessage("GA3001", Severity.ERROR,
    "cannot append to non-slice {value} ({type})",
    Category.CONTRACT, "The destination of append must resolve to a slice."))

_add(ErrorMessage("GA3002", Severity.ERROR,
    "value of type {type} is not assignable to element type {elem}",
    Category.CONTRACT, "Appended elements must match the destination element type."))

# Type expressions - GA4xxx range
_add(ErrorMessage("GA4001", Severity.ERROR,
    "invalid type expression {text!r} at column {column}",
    Category.SYNTAX, "Type expressions look like 'int', '[]string' or '*Point'."),
    TypeSyntaxError)

_add(ErrorMessage("GA4002", Severity.ERROR,
    "unknown type name '{name}'",
    Category.SYNTAX, "Struct names must be passed to parse_type through 'structs'."),
    UnknownTypeError)
