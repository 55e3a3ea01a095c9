"""
Custom exception classes for the signalcast framework.

Every error raised by the cast layer carries an ``ErrorKind`` so callers can
handle registry and parsing failures uniformly, whichever rule failed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of failure kinds raised by the cast layer."""

    UNKNOWN_TYPE = "unknown_type"
    DUPLICATE_REGISTRATION = "duplicate_registration"
    MALFORMED_LITERAL = "malformed_literal"
    CONVERSION_FAILURE = "conversion_failure"


class SignalCastException(Exception):
    """Base exception class for all signalcast exceptions."""

    kind: ErrorKind


class UnknownTypeError(SignalCastException):
    """Raised when no cast entry is registered for a TypeKey."""

    kind = ErrorKind.UNKNOWN_TYPE

    def __init__(self, type_key: str):
        self.type_key = type_key
        super().__init__(f"No cast registered for type_key={type_key!r}")


class DuplicateRegistrationError(SignalCastException):
    """Raised when registering a TypeKey that already has a live entry."""

    kind = ErrorKind.DUPLICATE_REGISTRATION

    def __init__(self, type_key: str):
        self.type_key = type_key
        super().__init__(f"Cast already registered for type_key={type_key!r}")


class MalformedLiteralError(SignalCastException):
    """
    Raised when a vector or matrix literal violates the literal grammar.

    Attributes:
        position: Character offset in ``text`` where the expectation failed.
        expected: Short name of the expected token, e.g. ``"')'"``.
        text: The full literal that was being parsed.
        description: Human-readable explanation of the failure.

    Example:
        >>> raise MalformedLiteralError(expected="'['", position=0, text="test")
    """

    kind = ErrorKind.MALFORMED_LITERAL

    def __init__(
        self,
        *,
        expected: str,
        position: int,
        text: str,
        description: Optional[str] = None,
    ):
        self.expected = expected
        self.position = position
        self.text = text
        self.description = description or f"expected {expected}"
        found = text[position] if position < len(text) else "end of input"
        super().__init__(
            f"Malformed literal at position {position}: {self.description} (found {found!r})"
        )


class ConversionFailureError(SignalCastException):
    """Raised when a default cast cannot fully and validly read its input."""

    kind = ErrorKind.CONVERSION_FAILURE

    def __init__(self, type_key: str, text: str, reason: Optional[str] = None):
        self.type_key = type_key
        self.text = text
        self.reason = reason
        message = f"Cannot convert {text!r} to type_key={type_key!r}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)
