from __future__ import annotations

import numpy as np

from signalcast.casts.literal import parse_matrix, parse_vector
from signalcast.casts.scalars import format_double
from signalcast.core.types import MATRIX, VECTOR
from signalcast.registry import CastRegistry, register_cast


def _row(values: np.ndarray) -> str:
    return "".join(f"{format_double(v)} " for v in values)


class VectorCast:
    """``[ 0 0 1 ];`` for display, ``0 0 1`` for trace."""

    @staticmethod
    def parse(text: str) -> np.ndarray:
        return parse_vector(text)

    @staticmethod
    def display(value: np.ndarray) -> str:
        return f"[ {_row(np.ravel(value))} ];\n"

    @staticmethod
    def trace(value: np.ndarray) -> str:
        return f"{_row(np.ravel(value))}\n"


class MatrixCast:
    """Row-bracketed display; trace flattens row-major."""

    @staticmethod
    def parse(text: str) -> np.ndarray:
        return parse_matrix(text)

    @staticmethod
    def display(value: np.ndarray) -> str:
        rows = [f"[ {_row(row)}]" for row in np.atleast_2d(value)]
        body = "; ".join(rows)
        if rows:
            body += " "
        return f"[ {body} ];\n"

    @staticmethod
    def trace(value: np.ndarray) -> str:
        return f"{_row(np.ravel(value))}\n"


def register_casts(registry: CastRegistry, *, overwrite: bool = False) -> None:
    register_cast(registry, VECTOR, overwrite=overwrite)(VectorCast)
    register_cast(registry, MATRIX, overwrite=overwrite)(MatrixCast)
