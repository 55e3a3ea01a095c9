"""
Command-line interface and entry points for signalcast.

Lets an operator check how a literal is parsed and rendered for a given type,
list the registered types, and load or validate a signal configuration file.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from signalcast.bootstrap import build_registry
from signalcast.core.logger import configure_root_logger, get_logger
from signalcast.loader import load_graph, read_config_file
from signalcast.models.config import GraphConfig
from signalcast.signal import Signal

logger = get_logger(__name__)


def main(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Load a signal configuration and render every signal.

    Can be called with either:
    - A config file path (JSON/YAML)
    - A config dictionary (programmatic)

    Returns:
        Result with status, graph name, and the ``get()`` rendering of each signal

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If neither config_path nor config_dict provided
    """
    try:
        if config_dict:
            config = config_dict
            logger.info("Using provided config dictionary")
        elif config_path:
            config = read_config_file(config_path)
            logger.info(f"Loaded config from {config_path}")
        else:
            raise ValueError("Either config_path or config_dict must be provided")

        graph = load_graph(config)
        result: Dict[str, Any] = {
            "status": "success",
            "name": graph.name,
            "types": list(graph.registry.keys()),
            "signals": {name: sig.get() for name, sig in graph.signals.items()},
        }
        graph.registry.teardown()
        return result

    except Exception as e:
        logger.error(f"Loading signals failed: {str(e)}")
        raise


def validate_config(config_path: str) -> bool:
    """
    Validate a configuration without keeping the loaded graph.

    Checks the schema, that every configured cast module installs, and that
    every initial value parses for its type.
    """
    try:
        config = read_config_file(config_path)
        logger.info(f"Validating config: {config_path}")

        cfg = GraphConfig.model_validate(config)
        load_graph(cfg).registry.teardown()

        logger.info("Configuration is valid")
        return True

    except Exception as e:
        logger.error(f"Config validation failed: {str(e)}")
        raise


def cast_literal(type_name: str, literal: str) -> Dict[str, str]:
    """Parse ``literal`` as ``type_name`` and return its display and trace forms."""
    with build_registry() as registry:
        sig: Signal = Signal("cli", type_name, registry)
        sig.set(literal)
        return {"get": sig.get(), "trace": sig.trace()}


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Command-line interface for signalcast.

    Usage:
        signalcast cast vector "[3](1,2,3)"
        signalcast types
        signalcast load /path/to/signals.yaml
        signalcast validate /path/to/signals.yaml
    """
    parser = argparse.ArgumentParser(
        prog="signalcast",
        description="Typed signal casts for dataflow graphs",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    cast_parser = subparsers.add_parser("cast", help="Parse a literal and print its renderings")
    cast_parser.add_argument("type", help="TypeKey, e.g. double, vector, matrix")
    cast_parser.add_argument("literal", help="Literal in the type's input syntax")

    subparsers.add_parser("types", help="List the built-in registered types")

    load_parser = subparsers.add_parser("load", help="Load a signal configuration and print each signal")
    load_parser.add_argument("config", help="Path to configuration file (JSON or YAML)")

    validate_parser = subparsers.add_parser("validate", help="Validate a signal configuration")
    validate_parser.add_argument("config", help="Path to configuration file (JSON or YAML)")

    args = parser.parse_args(argv)
    configure_root_logger("DEBUG" if args.verbose else "WARNING")

    if args.command == "cast":
        try:
            rendered = cast_literal(args.type, args.literal)
        except Exception as e:
            logger.error(f"Cast failed: {e}")
            sys.exit(1)
        sys.stdout.write(rendered["get"])
        sys.stdout.write(rendered["trace"])
        sys.exit(0)

    elif args.command == "types":
        with build_registry() as registry:
            for key in registry.keys():
                print(key)
        sys.exit(0)

    elif args.command == "load":
        try:
            result = main(config_path=args.config)
        except Exception as e:
            logger.error(f"Load failed: {e}")
            sys.exit(1)
        for name, rendered in result["signals"].items():
            sys.stdout.write(f"{name}: {rendered}")
            if not rendered.endswith("\n"):
                sys.stdout.write("\n")
        sys.exit(0)

    elif args.command == "validate":
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
