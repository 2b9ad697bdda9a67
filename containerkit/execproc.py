"""Processing of output read from commands run in containers."""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass
from typing import BinaryIO

_STDIN, _STDOUT, _STDERR, _SYSTEMERR = range(4)


class DaemonStreamError(RuntimeError):
    """The daemon reported an error inside the multiplexed stream."""


@dataclass
class ProcessOptions:
    """Options applicable to the reader processor."""

    reader: BinaryIO


class ProcessOption:
    """A modification of the reader processor."""

    def __init__(self, fn: Callable[[ProcessOptions], None]) -> None:
        self._fn = fn

    def apply(self, opts: ProcessOptions) -> None:
        """Apply this option to *opts*."""
        self._fn(opts)


def std_copy(stdout: BinaryIO, stderr: BinaryIO, source: BinaryIO) -> int:
    """Demultiplex a Docker stream from *source* into *stdout* and *stderr*.

    Returns the number of payload bytes written. A truncated frame ends the
    copy; an unknown stream id raises ValueError and a daemon error frame
    raises DaemonStreamError.
    """
    written = 0
    while len(header := source.read(8)) == 8:
        stream_id = header[0]
        if stream_id > _SYSTEMERR:
            raise ValueError(f"Unrecognized input header: {stream_id}")
        size = int.from_bytes(header[4:8], "big")
        payload = source.read(size)
        if len(payload) < size:
            break
        if stream_id == _SYSTEMERR:
            raise DaemonStreamError(f"error from daemon in stream: {payload.decode(errors='replace')}")
        (stderr if stream_id == _STDERR else stdout).write(payload)
        written += size
    return written


def multiplexed() -> ProcessOption:
    """Option replacing the reader with the stdout part of a multiplexed stream."""

    def _apply(opts: ProcessOptions) -> None:
        out = io.BytesIO()
        std_copy(out, io.BytesIO(), opts.reader)
        out.seek(0)
        opts.reader = out

    return ProcessOption(_apply)