"""signalcast.

Typed-value layer for dataflow signal graphs: a cast registry keyed by
explicit type identifiers, signals that delegate their textual get/set/trace
through it, and the vector/matrix literal grammar.
"""

from signalcast.bootstrap import build_registry, load_builtin_casts
from signalcast.core.exceptions import (
    ConversionFailureError,
    DuplicateRegistrationError,
    ErrorKind,
    MalformedLiteralError,
    SignalCastException,
    UnknownTypeError,
)
from signalcast.core.result import CastResult
from signalcast.core.types import BOOL, BUILTIN_TYPE_KEYS, DOUBLE, INT, MATRIX, STRING, VECTOR, TypeKey
from signalcast.registry import CastEntry, CastRegistry, register_cast
from signalcast.signal import Signal

__version__ = "0.1.0"

__all__ = [
    "BOOL",
    "BUILTIN_TYPE_KEYS",
    "DOUBLE",
    "INT",
    "MATRIX",
    "STRING",
    "VECTOR",
    "CastEntry",
    "CastRegistry",
    "CastResult",
    "ConversionFailureError",
    "DuplicateRegistrationError",
    "ErrorKind",
    "MalformedLiteralError",
    "Signal",
    "SignalCastException",
    "TypeKey",
    "UnknownTypeError",
    "build_registry",
    "load_builtin_casts",
    "register_cast",
]
