from __future__ import annotations

from typing import Callable, Generic, Optional, TextIO, TypeVar, Union

from signalcast.core.exceptions import SignalCastException
from signalcast.core.logger import get_logger
from signalcast.core.types import TypeKey, type_key as _type_key
from signalcast.registry import CastEntry, CastRegistry


T = TypeVar("T")

SignalFunction = Callable[[int], T]

log = get_logger(__name__)


class Signal(Generic[T]):
    """
    Named, time-stamped holder of one typed value.

    The signal only knows its TypeKey; textual ``set``/``get``/``trace`` are
    delegated to the registry entry for that key, so generic graph code can
    drive signals of any registered type.

    Example:
        >>> from signalcast import VECTOR, build_registry
        >>> registry = build_registry()
        >>> sig = Signal("vector", VECTOR, registry)
        >>> sig.set("[3](1,2,3)")
        >>> sig.get()
        '[ 1 2 3  ];\\n'
    """

    def __init__(self, name: str, type_key: str, registry: CastRegistry):
        self.name = name
        self._type_key = _type_key(type_key)
        self.registry = registry
        self.time = 0
        self._value: Optional[T] = None
        self._ready = False
        self._function: Optional[SignalFunction] = None
        self._computed_at: Optional[int] = None

    @property
    def type_key(self) -> TypeKey:
        return self._type_key

    @property
    def kind(self) -> str:
        return "Fun" if self._function is not None else "Cst"

    @property
    def is_set(self) -> bool:
        return self._ready

    @property
    def value(self) -> Optional[T]:
        return self._value

    def header(self) -> str:
        return f"Sig:{self.name} (Type {self.kind})"

    def __str__(self) -> str:
        return self.header()

    def __repr__(self) -> str:
        return f"Signal(name={self.name!r}, type_key={self._type_key!r}, time={self.time})"

    def _entry(self) -> CastEntry:
        return self.registry.lookup(self._type_key)

    def set(self, source: Union[str, TextIO]) -> None:
        """Parse ``source`` and make it the new constant payload.

        On failure the previous payload and time are left untouched and the
        error propagates.
        """
        text = source.read() if hasattr(source, "read") else source
        try:
            value = self._entry().parse(text)
        except SignalCastException as exc:
            log.debug(f"Signal {self.name!r} rejected {text!r}: {exc}")
            raise
        self.set_constant(value)

    def set_constant(self, value: T) -> None:
        self._function = None
        self._computed_at = None
        self._value = value
        self._ready = True
        self.time += 1

    def set_function(self, function: SignalFunction) -> None:
        """Drive the signal from ``function(time)`` instead of a constant."""
        self._function = function
        self._computed_at = None
        self._ready = False

    def access(self, time: int) -> Optional[T]:
        """Return the payload, recomputing it first if it is older than ``time``."""
        if self._function is not None and (self._computed_at is None or time > self._computed_at):
            self._value = self._function(time)
            self._computed_at = time
            self._ready = True
            self.time = time
        return self._value

    def get(self) -> str:
        if not self._ready:
            if self._function is None:
                return self.header()
            self.access(self.time)
        return self._entry().display(self._value)

    def trace(self) -> str:
        if not self._ready:
            if self._function is None:
                return "\n"
            self.access(self.time)
        return self._entry().trace(self._value)
