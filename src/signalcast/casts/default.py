from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from signalcast.core.exceptions import ConversionFailureError
from signalcast.core.types import TypeKey, type_key as _type_key
from signalcast.registry import CastEntry, CastRegistry


T = TypeVar("T")

ReadFn = Callable[[str], T]
WriteFn = Callable[[T], str]


@dataclass(frozen=True)
class DefaultCast(Generic[T]):
    """Cast for a type with a standard textual read and write.

    ``read`` must consume the whole token or raise ``ValueError``. ``display``
    and ``trace`` are the same newline-terminated write.
    """

    key: TypeKey
    read: ReadFn
    write: WriteFn = str

    def parse(self, text: str) -> T:
        token = text.strip()
        if not token:
            raise ConversionFailureError(self.key, text, "empty input")
        try:
            return self.read(token)
        except (ValueError, OverflowError) as exc:
            raise ConversionFailureError(self.key, text, str(exc)) from exc

    def display(self, value: T) -> str:
        return f"{self.write(value)}\n"

    def trace(self, value: T) -> str:
        return self.display(value)

    def entry(self) -> CastEntry:
        return CastEntry(key=self.key, parse=self.parse, display=self.display, trace=self.trace)


def register_default_cast(
    registry: CastRegistry,
    key: str,
    read: ReadFn,
    write: WriteFn = str,
    *,
    overwrite: bool = False,
) -> CastEntry:
    cast: DefaultCast = DefaultCast(key=_type_key(key), read=read, write=write)
    return registry.register_entry(cast.entry(), overwrite=overwrite)
