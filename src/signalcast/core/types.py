from __future__ import annotations

from typing import NewType, Tuple


# Explicit, application-chosen identifier for one concrete value type.
# Two modules registering the same logical type must use the same string.
TypeKey = NewType("TypeKey", str)


DOUBLE = TypeKey("double")
INT = TypeKey("int")
BOOL = TypeKey("bool")
STRING = TypeKey("string")
VECTOR = TypeKey("vector")
MATRIX = TypeKey("matrix")

BUILTIN_TYPE_KEYS: Tuple[TypeKey, ...] = (DOUBLE, INT, BOOL, STRING, VECTOR, MATRIX)


def type_key(name: str) -> TypeKey:
    """Validate ``name`` and return it as a TypeKey."""
    if not isinstance(name, str):
        raise TypeError(f"TypeKey must be a string, got {type(name).__name__}")
    if not name or name != name.strip():
        raise ValueError(f"Invalid TypeKey {name!r}: must be non-empty without surrounding whitespace")
    return TypeKey(name)
