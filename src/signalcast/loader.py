from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from signalcast.bootstrap import load_builtin_casts
from signalcast.core.logger import get_logger, push_context, reset_context
from signalcast.models.config import GraphConfig
from signalcast.registry import CastRegistry
from signalcast.signal import Signal


@dataclass
class LoadedGraph:
    name: str
    registry: CastRegistry
    signals: Dict[str, Signal] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Signal:
        return self.signals[name]


def read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a JSON or YAML configuration file into a dict."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            return json.load(f)
        if config_file.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
    raise ValueError(f"Unsupported config format: {config_file.suffix}. Use .json or .yaml")


def load_graph(
    cfg: Union[Dict[str, Any], GraphConfig],
    registry: Optional[CastRegistry] = None,
) -> LoadedGraph:
    """
    Build the registry and signals described by ``cfg``.

    Args:
        cfg: Graph configuration as a dict or a validated GraphConfig.
        registry: Registry to populate. A fresh one is created if omitted.

    Returns:
        LoadedGraph holding the registry and each signal by name.

    Raises:
        ValidationError: If the config dict is invalid.
        DuplicateRegistrationError: If ``registry`` already holds a configured
            cast and the config does not set ``registry.overwrite``.
        MalformedLiteralError, ConversionFailureError, UnknownTypeError:
            If an initial value cannot be set.
    """
    if isinstance(cfg, dict):
        cfg = GraphConfig.model_validate(cfg)

    get_logger("signalcast").setLevel(cfg.log_level)
    log = get_logger(__name__)
    token = push_context(cfg.name)
    try:
        if registry is None:
            registry = CastRegistry()
        load_builtin_casts(registry, modules=cfg.registry.casts, overwrite=cfg.registry.overwrite)
        log.info(f"Cast registry ready with {len(registry)} types")

        graph = LoadedGraph(name=cfg.name, registry=registry)
        for sig_cfg in cfg.signals:
            sig: Signal = Signal(sig_cfg.name, sig_cfg.type, registry)
            if sig_cfg.value is not None:
                sig.set(sig_cfg.value)
            graph.signals[sig.name] = sig
            log.debug(f"Created signal {sig.name!r} of type {sig.type_key!r}")

        log.info(f"Loaded {len(graph.signals)} signals")
        return graph
    finally:
        reset_context(token)
