"""Log records, log consumers and the logger interface."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TextIO

STDOUT_LOG = "STDOUT"
STDERR_LOG = "STDERR"


@dataclass(frozen=True)
class Log:
    """A message produced by a process on STDOUT or STDERR."""

    log_type: str
    content: bytes


class LogConsumer(ABC):
    """Anything that handles log records."""

    @abstractmethod
    def accept(self, log: Log) -> None:
        """Handle one log record."""


class Logging(ABC):
    """A printf-style logger."""

    @abstractmethod
    def printf(self, format: str, *args: Any) -> None:
        """Log a message built from a %-style format and its arguments."""


class _StandardLogger(Logging):
    """Writes timestamped lines to a stream, standard error by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def printf(self, format: str, *args: Any) -> None:
        message = format % args if args else format
        if not message.endswith("\n"):
            message += "\n"
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(time.strftime("%Y/%m/%d %H:%M:%S ") + message)
        stream.flush()


_DEFAULT_LOGGER = _StandardLogger()


def default_logger() -> Logging:
    """Return the shared logger that writes to standard error."""
    return _DEFAULT_LOGGER


@dataclass(frozen=True)
class LoggerOption:
    """Option that installs a logger on provider options."""

    logger: Logging

    def apply_generic_to(self, opts: Any) -> None:
        """Set the logger on generic provider options."""
        opts.logger = self.logger

    def apply_docker_to(self, opts: Any) -> None:
        """Set the logger on Docker provider options."""
        opts.logger = self.logger


def with_logger(logger: Logging) -> LoggerOption:
    """Build an option replacing the default logger with *logger*."""
    return LoggerOption(logger)