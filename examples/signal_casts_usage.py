"""
Example: registering casts at bootstrap and driving signals through text.

This shows the separation between:
- Bootstrap: one explicit CastRegistry, populated once
- Runtime: signals parse, display and trace through that registry
"""

from signalcast import (
    DOUBLE,
    VECTOR,
    MalformedLiteralError,
    Signal,
    build_registry,
)
from signalcast.core.diagnostics import LoggerVerbosity, MessageType, SignalLogger
from signalcast.core.logger import configure_root_logger
from signalcast.loader import load_graph, read_config_file

configure_root_logger("INFO")


# =============================================================================
# Example 1: Built-in casts
# =============================================================================
registry = build_registry()

gain = Signal("gain", DOUBLE, registry)
gain.set("42.0")
print(gain.get(), end="")        # 42

posture = Signal("posture", VECTOR, registry)
print(posture)                   # Sig:posture (Type Cst)
posture.set("[5](0,0,1,0,0)")
print(posture.get(), end="")     # [ 0 0 1 0 0  ];
print(posture.trace(), end="")   # 0 0 1 0 0


# =============================================================================
# Example 2: A failed set leaves the previous value and reports it
# =============================================================================
diagnostics = SignalLogger(verbosity=LoggerVerbosity.WARNING_ERROR)
try:
    posture.set("[5](1,2,3,4,5]")
except MalformedLiteralError as exc:
    diagnostics.send_msg(f"posture rejected: {exc}", MessageType.WARNING)
print(posture.get(), end="")     # still [ 0 0 1 0 0  ];


# =============================================================================
# Example 3: An extension registering its own type after bootstrap
# =============================================================================
registry.register(
    "quaternion",
    parse=lambda text: tuple(float(x) for x in text.split()),
    display=lambda q: "[ " + " ".join(f"{x:g}" for x in q) + " ]\n",
    trace=lambda q: " ".join(f"{x:g}" for x in q) + "\n",
)
orientation = Signal("orientation", "quaternion", registry)
orientation.set("1 0 0 0")
print(orientation.get(), end="")  # [ 1 0 0 0 ]


# =============================================================================
# Example 4: Loading signals from configuration
# =============================================================================
graph = load_graph(read_config_file("examples/signals.yaml"))
for name, sig in graph.signals.items():
    print(f"{name}: {sig.get()}", end="" if sig.is_set else "\n")

registry.teardown()
graph.registry.teardown()
