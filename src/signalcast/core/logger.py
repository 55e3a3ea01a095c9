import contextvars
import logging
import sys
from typing import Optional

# Context variable naming the graph/entity on whose behalf the core is running
_CONTEXT: contextvars.ContextVar[str] = contextvars.ContextVar("signalcast_context", default="-")


def current_context() -> str:
    """Return the context name attached to log records, "-" when none is set."""
    return _CONTEXT.get()


class _ContextFilter(logging.Filter):
    """Logging filter that injects the current context name into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.context = current_context()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | ctx=%(context)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the signalcast logger.

    Root logger stays at INFO to suppress library noise. Only the signalcast
    namespace is set to the requested level.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _ContextFilter) for f in h.filters):
            logging.getLogger("signalcast").setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_ContextFilter())
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    logging.getLogger("signalcast").setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "signalcast") -> logging.Logger:
    """
    Get a module-specific logger.

    The core never configures handlers implicitly; applications call
    ``configure_root_logger`` at bootstrap (the CLI does).
    """
    return logging.getLogger(name)


def push_context(name: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current context name and return a token for later reset."""
    if not name:
        return None
    return _CONTEXT.set(name)


def reset_context(token: Optional[contextvars.Token]) -> None:
    """Reset the context using the provided token (if any)."""
    if token is None:
        return
    _CONTEXT.reset(token)
