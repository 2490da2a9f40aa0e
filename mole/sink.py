"""Destinations for rendered tree lines.

``ImmediateSink`` prints each line as it is produced. ``BufferedSink``
accumulates lines in memory for save mode and hands the text over exactly
once through ``finalize``.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO


class ImmediateSink:
    """Write each line straight to a text stream (``sys.stdout`` by default).

    Without an injected stream, lines go to stdout's binary layer as UTF-8 so
    a stdout encoding that lacks the box-drawing glyphs cannot abort a render.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, line: str) -> None:
        if self._stream is not None:
            self._stream.write(line + "\n")
            return
        stdout = sys.stdout
        binary = getattr(stdout, "buffer", None)
        if binary is None:
            stdout.write(line + "\n")
            return
        stdout.flush()
        binary.write((line + "\n").encode("utf-8", errors="replace"))


class BufferedSink:
    """Accumulate lines in memory until ``finalize`` returns the text."""

    def __init__(self) -> None:
        self._buffer: io.StringIO | None = io.StringIO()

    @property
    def finalized(self) -> bool:
        return self._buffer is None

    def emit(self, line: str) -> None:
        if self._buffer is None:
            raise RuntimeError("cannot emit into a finalized BufferedSink")
        self._buffer.write(line + "\n")

    def finalize(self) -> str:
        """Return accumulated text and release the buffer."""
        if self._buffer is None:
            raise RuntimeError("BufferedSink already finalized")
        text = self._buffer.getvalue()
        self._buffer.close()
        self._buffer = None
        return text


LineSink = ImmediateSink | BufferedSink


__all__ = ["ImmediateSink", "BufferedSink", "LineSink"]
