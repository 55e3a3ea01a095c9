from __future__ import annotations

import json
import logging

import pytest
import yaml
from pydantic import ValidationError

from signalcast.bootstrap import BUILTIN_CAST_MODULES, build_registry, load_builtin_casts
from signalcast.core.exceptions import DuplicateRegistrationError, MalformedLiteralError
from signalcast.core.types import BUILTIN_TYPE_KEYS
from signalcast.loader import load_graph, read_config_file
from signalcast.models.config import GraphConfig
from signalcast.registry import CastRegistry


@pytest.fixture(autouse=True)
def restore_package_level():
    package = logging.getLogger("signalcast")
    level = package.level
    yield
    package.setLevel(level)


def _config() -> dict:
    return {
        "name": "arm",
        "signals": [
            {"name": "gain", "type": "double", "value": "0.5"},
            {"name": "posture", "type": "vector", "value": "[3](0, 0.25, 1)"},
            {"name": "jacobian", "type": "matrix", "value": "[2,2]((1,0)(0,1))"},
            {"name": "output", "type": "vector"},
        ],
    }


def test_build_registry_installs_builtin_types():
    registry = build_registry()

    assert registry.keys() == sorted(BUILTIN_TYPE_KEYS)


def test_build_registry_with_subset_of_modules():
    registry = build_registry(["signalcast.casts.linalg"])

    assert registry.keys() == ["matrix", "vector"]


def test_load_builtin_casts_twice_requires_overwrite():
    registry = CastRegistry()
    load_builtin_casts(registry)

    with pytest.raises(DuplicateRegistrationError):
        load_builtin_casts(registry)

    load_builtin_casts(registry, overwrite=True)
    assert len(registry) == 6


def test_load_builtin_casts_rejects_module_without_hook():
    with pytest.raises(AttributeError, match="register_casts"):
        load_builtin_casts(CastRegistry(), modules=["signalcast.core.types"])


def test_graph_config_defaults():
    cfg = GraphConfig.model_validate({})

    assert cfg.name == "graph"
    assert cfg.registry.casts == list(BUILTIN_CAST_MODULES)
    assert cfg.registry.overwrite is False
    assert cfg.signals == []


def test_graph_config_rejects_duplicate_signal_names():
    with pytest.raises(ValidationError, match="Duplicate signal name"):
        GraphConfig.model_validate(
            {"signals": [{"name": "a", "type": "double"}, {"name": "a", "type": "int"}]}
        )


def test_signal_config_rejects_blank_type():
    with pytest.raises(ValidationError, match="Invalid TypeKey"):
        GraphConfig.model_validate({"signals": [{"name": "a", "type": " "}]})


def test_load_graph_sets_initial_values():
    graph = load_graph(_config())

    assert graph.name == "arm"
    assert graph["gain"].get() == "0.5\n"
    assert graph["posture"].get() == "[ 0 0.25 1  ];\n"
    assert graph["jacobian"].trace() == "1 0 0 1 \n"
    assert graph["output"].get() == "Sig:output (Type Cst)"
    assert graph["posture"].registry is graph.registry


def test_load_graph_propagates_literal_errors():
    cfg = _config()
    cfg["signals"][1]["value"] = "[3](0, 0.25"

    with pytest.raises(MalformedLiteralError):
        load_graph(cfg)


def test_load_graph_applies_configured_log_level():
    load_graph({"name": "g", "log_level": "DEBUG"})

    assert logging.getLogger("signalcast").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("signalcast.loader").isEnabledFor(logging.DEBUG)


def test_read_config_file_json_and_yaml(tmp_path):
    json_path = tmp_path / "signals.json"
    json_path.write_text(json.dumps(_config()))
    yaml_path = tmp_path / "signals.yaml"
    yaml_path.write_text(yaml.safe_dump(_config()))

    assert read_config_file(json_path) == _config()
    assert read_config_file(yaml_path) == _config()


def test_read_config_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config_file(tmp_path / "missing.json")

    bad = tmp_path / "signals.toml"
    bad.write_text("")
    with pytest.raises(ValueError, match="Unsupported config format"):
        read_config_file(bad)
