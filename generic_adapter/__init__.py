"""Generic Adapter - runtime value introspection for generic algorithms."""
import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("generic-adapter")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

logging.getLogger(__name__).addHandler(logging.NullHandler())

from generic_adapter import reflect as _reflect
from generic_adapter.reflect import *
from generic_adapter.values import Ref, Slice, zero_of
from generic_adapter.semantics.typesys import (
    Kind, BuiltinType, SliceType, PointerType, StructType, OtherType, Type,
)
from generic_adapter.semantics.type_predicates import type_is_struct, type_is_pointer
from generic_adapter.semantics.type_parser import parse_type
from generic_adapter.internals.config import AdapterConfig, configured, get_config, set_config
from generic_adapter.internals.errors import (
    ERR,
    ERR_NOT_A_STRUCT,
    ERR_UNKNOWN_FIELD,
    GenericAdapterError,
    NotAStructError,
    UnknownFieldError,
    VerificationError,
    ContractError,
    TypeSyntaxError,
    UnknownTypeError,
)

__all__ = list(_reflect.__all__) + [
    "Ref",
    "Slice",
    "zero_of",
    "Kind",
    "BuiltinType",
    "SliceType",
    "PointerType",
    "StructType",
    "OtherType",
    "Type",
    "type_is_struct",
    "type_is_pointer",
    "parse_type",
    "AdapterConfig",
    "configured",
    "get_config",
    "set_config",
    "ERR",
    "ERR_NOT_A_STRUCT",
    "ERR_UNKNOWN_FIELD",
    "GenericAdapterError",
    "NotAStructError",
    "UnknownFieldError",
    "VerificationError",
    "ContractError",
    "TypeSyntaxError",
    "UnknownTypeError",
]
