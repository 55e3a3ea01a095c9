"""
Severity-tagged diagnostics for graph entities.

The cast core never writes diagnostics itself; it raises structured errors.
Entities that want to report them use a ``SignalLogger``, which filters
messages by verbosity, throttles the ``*_STREAM`` severities to one message
per print period, and forwards what survives to a ``MessageSink``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from signalcast.core.logger import get_logger


class MessageType(Enum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    DEBUG_STREAM = 4
    INFO_STREAM = 5
    WARNING_STREAM = 6
    ERROR_STREAM = 7

    @property
    def is_stream(self) -> bool:
        return self.value >= MessageType.DEBUG_STREAM.value

    @property
    def base(self) -> "MessageType":
        """The non-stream severity this message type maps to."""
        return MessageType(self.value % 4)


class LoggerVerbosity(Enum):
    ALL = "all"
    INFO_WARNING_ERROR = "info_warning_error"
    WARNING_ERROR = "warning_error"
    ERROR = "error"
    NONE = "none"


# Lowest base severity accepted at each verbosity
_THRESHOLD = {
    LoggerVerbosity.ALL: MessageType.DEBUG.value,
    LoggerVerbosity.INFO_WARNING_ERROR: MessageType.INFO.value,
    LoggerVerbosity.WARNING_ERROR: MessageType.WARNING.value,
    LoggerVerbosity.ERROR: MessageType.ERROR.value,
}

_LOGGING_LEVEL = {
    MessageType.DEBUG: logging.DEBUG,
    MessageType.INFO: logging.INFO,
    MessageType.WARNING: logging.WARNING,
    MessageType.ERROR: logging.ERROR,
}


class MessageSink(Protocol):
    def append(self, message: str, severity: MessageType) -> None:
        ...


class LoggingSink:
    """Forward diagnostics to a stdlib logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("signalcast.diagnostics")

    def append(self, message: str, severity: MessageType) -> None:
        self.logger.log(_LOGGING_LEVEL[severity.base], message)


class SignalLogger:
    """
    Per-entity message filter in front of a ``MessageSink``.

    ``countdown()`` is called once per control cycle; it advances the stream
    print clock by ``time_sample`` seconds. Stream messages are only
    forwarded on cycles where the clock has wrapped, i.e. at most once every
    ``stream_print_period`` seconds.

    Example:
        >>> log = SignalLogger(time_sample=0.001, stream_print_period=0.005)
        >>> log.verbosity = LoggerVerbosity.ALL
        >>> log.send_msg("cycle done", MessageType.INFO_STREAM)
        >>> log.countdown()
    """

    def __init__(
        self,
        sink: Optional[MessageSink] = None,
        *,
        time_sample: float = 0.001,
        stream_print_period: float = 1.0,
        verbosity: LoggerVerbosity = LoggerVerbosity.ERROR,
    ):
        self.sink: MessageSink = sink if sink is not None else LoggingSink()
        self.verbosity = verbosity
        self._time_sample = 0.0
        self._stream_print_period = 0.0
        self.set_time_sample(time_sample)
        self.set_stream_print_period(stream_print_period)
        self._print_countdown = 0.0

    @property
    def time_sample(self) -> float:
        return self._time_sample

    @property
    def stream_print_period(self) -> float:
        return self._stream_print_period

    def set_time_sample(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError(f"time_sample must be positive, got {seconds!r}")
        self._time_sample = float(seconds)

    def set_stream_print_period(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError(f"stream_print_period must be positive, got {seconds!r}")
        self._stream_print_period = float(seconds)

    def countdown(self) -> None:
        if self._print_countdown <= 0.0:
            self._print_countdown = self._stream_print_period
        self._print_countdown -= self._time_sample

    def accepts(self, severity: MessageType) -> bool:
        if self.verbosity is LoggerVerbosity.NONE:
            return False
        if severity.is_stream and self._print_countdown > 0.0:
            return False
        return severity.base.value >= _THRESHOLD[self.verbosity]

    def send_msg(self, message: str, severity: MessageType = MessageType.INFO) -> bool:
        """Forward ``message`` to the sink if accepted; return whether it was."""
        if not self.accepts(severity):
            return False
        self.sink.append(message, severity)
        return True
