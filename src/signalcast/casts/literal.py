"""
Recursive-descent parser for vector and matrix literals.

Vector:  ``[N](v0, v1, ... )``
Matrix:  ``[R,C]((r0c0, r0c1)(r1c0, r1c1) ... )``

Values inside parentheses are separated by any run of commas and/or
whitespace. Whitespace is allowed before every structural token. Every
violation raises ``MalformedLiteralError`` naming the first unmet
expectation and its position; nothing partially parsed escapes.
"""

from __future__ import annotations

import re
from typing import List, Optional

import numpy as np

from signalcast.core.exceptions import MalformedLiteralError


SCALAR_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)
_SIZE = re.compile(r"\d+", re.ASCII)
_WHITESPACE = re.compile(r"\s*")
_SEPARATORS = re.compile(r"[\s,]+")


class _Cursor:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def fail(self, expected: str, description: Optional[str] = None) -> MalformedLiteralError:
        return MalformedLiteralError(
            expected=expected,
            position=self.pos,
            text=self.text,
            description=description,
        )

    def skip_whitespace(self) -> None:
        self.pos = _WHITESPACE.match(self.text, self.pos).end()

    def skip_separators(self) -> bool:
        match = _SEPARATORS.match(self.text, self.pos)
        if match is None:
            return False
        self.pos = match.end()
        return True

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, char: str, description: Optional[str] = None) -> None:
        self.skip_whitespace()
        if self.peek() != char:
            raise self.fail(f"{char!r}", description)
        self.pos += 1

    def size(self, description: str = "expected integer size") -> int:
        self.skip_whitespace()
        match = _SIZE.match(self.text, self.pos)
        if match is None:
            raise self.fail("integer size", description)
        self.pos = match.end()
        return int(match.group(0))

    def scalar(self) -> Optional[float]:
        match = SCALAR_PATTERN.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return float(match.group(0))

    def values(self) -> List[float]:
        """VAL (sep VAL)*, tolerating a trailing separator; may be empty."""
        out: List[float] = []
        self.skip_whitespace()
        value = self.scalar()
        while value is not None:
            out.append(value)
            if not self.skip_separators():
                break
            value = self.scalar()
        return out

    def expect_end(self) -> None:
        self.skip_whitespace()
        if self.pos != len(self.text):
            raise self.fail("')'", "expected ')' to end the literal, found trailing characters")


def parse_vector(text: str) -> np.ndarray:
    """Parse ``[N](v0,...,vN-1)`` into a 1-D float64 array of length N."""
    cur = _Cursor(text)
    cur.expect("[")
    size = cur.size()
    cur.expect("]")
    cur.expect("(")
    values = cur.values()
    cur.skip_whitespace()
    if cur.peek() == ")" and len(values) != size:
        raise cur.fail(f"{size} values", f"expected {size} values, got {len(values)}")
    cur.expect(")")
    cur.expect_end()
    return np.array(values, dtype=np.float64)


def parse_matrix(text: str) -> np.ndarray:
    """Parse ``[R,C]((row)(row)...)`` into an R x C row-major float64 array."""
    cur = _Cursor(text)
    cur.expect("[")
    rows = cur.size()
    cur.expect(",")
    cols = cur.size()
    cur.expect("]")
    cur.expect("(")

    data: List[List[float]] = []
    for index in range(1, rows + 1):
        cur.skip_separators()
        cur.expect("(", f"expected '(' to open row {index}")
        row = cur.values()
        cur.skip_whitespace()
        if cur.peek() == ")" and len(row) != cols:
            raise cur.fail(f"{cols} values", f"expected {cols} values in row {index}, got {len(row)}")
        cur.expect(")", f"expected ')' to close row {index}")
        data.append(row)

    cur.skip_separators()
    if cur.peek() == "(":
        raise cur.fail("')'", f"expected ')' after {rows} rows")
    cur.expect(")")
    cur.expect_end()
    return np.array(data, dtype=np.float64).reshape(rows, cols)
