from __future__ import annotations

import re

from signalcast.casts.default import register_default_cast
from signalcast.casts.literal import SCALAR_PATTERN
from signalcast.core.types import BOOL, DOUBLE, INT, STRING
from signalcast.registry import CastRegistry


_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_BOOL_WORDS = {"1": True, "true": True, "0": False, "false": False}


def read_double(token: str) -> float:
    if not SCALAR_PATTERN.fullmatch(token):
        raise ValueError(f"not a floating point number: {token!r}")
    return float(token)


def format_double(value: float) -> str:
    # Six significant digits, trailing zeros dropped: 42.0 -> "42", 1e-07 -> "1e-07"
    return f"{value:g}"


def read_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def read_bool(token: str) -> bool:
    try:
        return _BOOL_WORDS[token.lower()]
    except KeyError as exc:
        raise ValueError(f"not a boolean: {token!r}") from exc


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def register_casts(registry: CastRegistry, *, overwrite: bool = False) -> None:
    register_default_cast(registry, DOUBLE, read_double, format_double, overwrite=overwrite)
    register_default_cast(registry, INT, read_int, str, overwrite=overwrite)
    register_default_cast(registry, BOOL, read_bool, format_bool, overwrite=overwrite)
    register_default_cast(registry, STRING, str, str, overwrite=overwrite)
