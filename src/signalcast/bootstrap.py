from __future__ import annotations

import importlib
from typing import Iterable, Optional

from signalcast.core.logger import get_logger
from signalcast.registry import CastRegistry


BUILTIN_CAST_MODULES: tuple[str, ...] = (
    # Scalars through the default adapter
    "signalcast.casts.scalars",
    # Vectors and matrices through the literal grammar
    "signalcast.casts.linalg",
)


def load_builtin_casts(
    registry: CastRegistry,
    *,
    modules: Iterable[str] = BUILTIN_CAST_MODULES,
    overwrite: bool = False,
) -> CastRegistry:
    """Install the casts of each module into ``registry``.

    Every module exposes ``register_casts(registry, *, overwrite=False)``;
    nothing is registered as an import side effect, so tests can build as
    many isolated registries as they like.
    """
    log = get_logger(__name__)

    for module_name in modules:
        module = importlib.import_module(module_name)
        installer = getattr(module, "register_casts", None)
        if installer is None:
            raise AttributeError(f"Cast module {module_name!r} has no register_casts(registry) hook")
        installer(registry, overwrite=overwrite)
        log.debug(f"Loaded casts from {module_name}")

    return registry


def build_registry(
    modules: Optional[Iterable[str]] = None,
    *,
    overwrite: bool = False,
) -> CastRegistry:
    """Construct a registry populated with the built-in casts (or ``modules``)."""
    registry = CastRegistry()
    return load_builtin_casts(
        registry,
        modules=BUILTIN_CAST_MODULES if modules is None else modules,
        overwrite=overwrite,
    )
