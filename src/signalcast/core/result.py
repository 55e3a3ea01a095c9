from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from signalcast.core.exceptions import ErrorKind, SignalCastException


T = TypeVar("T")


@dataclass(frozen=True)
class CastResult(Generic[T]):
    """Either a value or a signalcast error, returned by the ``try_*`` APIs."""

    value: Optional[T] = None
    error: Optional[SignalCastException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "CastResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: SignalCastException) -> "CastResult[T]":
        return cls(error=error)


def capture(fn: Callable[[], T]) -> CastResult[T]:
    """Run ``fn`` and fold any signalcast error into a CastResult."""
    try:
        return CastResult.success(fn())
    except SignalCastException as exc:
        return CastResult.failure(exc)
