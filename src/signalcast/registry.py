from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Type

from signalcast.core.exceptions import DuplicateRegistrationError, UnknownTypeError
from signalcast.core.logger import get_logger
from signalcast.core.result import CastResult, capture
from signalcast.core.types import TypeKey, type_key as _type_key


ParseFn = Callable[[str], Any]
RenderFn = Callable[[Any], str]

log = get_logger(__name__)


@dataclass(frozen=True)
class CastEntry:
    key: TypeKey
    parse: ParseFn
    display: RenderFn
    trace: RenderFn

    def try_parse(self, text: str) -> CastResult[Any]:
        return capture(lambda: self.parse(text))


class CastRegistry:
    """
    Mapping from TypeKey to the CastEntry that parses and renders its values.

    Built once during application bootstrap and handed to every Signal that
    needs it. Mutation and lookup share one lock, so an extension loaded after
    bootstrap can still register safely.

    Example:
        >>> with CastRegistry() as registry:
        ...     _ = registry.register("double", float, str, str)
        ...     registry.lookup("double").parse("1.5")
        1.5
    """

    def __init__(self) -> None:
        self._entries: Dict[TypeKey, CastEntry] = {}
        self._lock = threading.RLock()

    def register(
        self,
        key: str,
        parse: ParseFn,
        display: RenderFn,
        trace: Optional[RenderFn] = None,
        *,
        overwrite: bool = False,
    ) -> CastEntry:
        entry = CastEntry(
            key=_type_key(key),
            parse=parse,
            display=display,
            trace=trace if trace is not None else display,
        )
        return self.register_entry(entry, overwrite=overwrite)

    def register_entry(self, entry: CastEntry, *, overwrite: bool = False) -> CastEntry:
        with self._lock:
            if entry.key in self._entries:
                if not overwrite:
                    raise DuplicateRegistrationError(entry.key)
                log.warning(f"Overwriting cast registered for type_key={entry.key!r}")
            self._entries[entry.key] = entry
        log.debug(f"Registered cast for type_key={entry.key!r}")
        return entry

    def try_register(
        self,
        key: str,
        parse: ParseFn,
        display: RenderFn,
        trace: Optional[RenderFn] = None,
        *,
        overwrite: bool = False,
    ) -> CastResult[CastEntry]:
        return capture(lambda: self.register(key, parse, display, trace, overwrite=overwrite))

    def lookup(self, key: str) -> CastEntry:
        with self._lock:
            try:
                return self._entries[TypeKey(key)]
            except KeyError as exc:
                raise UnknownTypeError(key) from exc

    def try_lookup(self, key: str) -> Optional[CastEntry]:
        with self._lock:
            return self._entries.get(TypeKey(key))

    def lookup_result(self, key: str) -> CastResult[CastEntry]:
        return capture(lambda: self.lookup(key))

    def keys(self) -> List[TypeKey]:
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[TypeKey]:
        return iter(self.keys())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def teardown(self) -> None:
        """End of the registry lifecycle; every later lookup misses."""
        self.clear()
        log.debug("Cast registry torn down")

    def __enter__(self) -> "CastRegistry":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # type: ignore
        self.teardown()
        return False


def register_cast(
    registry: CastRegistry,
    key: str,
    *,
    overwrite: bool = False,
) -> Callable[[Type[Any]], Type[Any]]:
    """Register a class exposing static ``parse``/``display``/``trace``."""

    def decorator(cast_class: Type[Any]) -> Type[Any]:
        registry.register(
            key,
            cast_class.parse,
            cast_class.display,
            getattr(cast_class, "trace", None),
            overwrite=overwrite,
        )
        return cast_class

    return decorator
