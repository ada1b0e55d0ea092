"""Display and input capabilities.

The game loop never touches the terminal directly. It writes through a
:class:`DisplaySink` and reads through an :class:`InputSource`, both supplied
by the caller. The terminal implementations here are what ``main`` wires in.
"""

import os
import sys
from typing import Iterable, Optional, Protocol, TextIO

ANSI_CLEAR = "\x1b[2J\x1b[H"


class DisplaySink(Protocol):
    def clear(self) -> None: ...

    def write(self, text: str) -> None:
        """Write ``text`` as-is (no newline appended)."""
        ...

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line followed by a newline."""
        ...


class InputSource(Protocol):
    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or ``None`` at end of input."""
        ...


class TerminalDisplay:
    """``DisplaySink`` writing to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        if os.name == "nt" and self._stream is sys.stdout:
            os.system("cls")
        else:
            self._stream.write(ANSI_CLEAR)

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._stream.write(line + "\n")
        self._stream.flush()


class StreamInput:
    """``InputSource`` reading lines from a text stream (stdin by default).

    When the stream exposes its byte ``buffer`` (as ``sys.stdin`` does), lines
    are read from it and decoded with ``errors="replace"``, so undecodable
    input reaches the game as an unknown key rather than an exception.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def read_line(self) -> Optional[str]:
        buffer = getattr(self._stream, "buffer", None)
        if buffer is not None:
            raw = buffer.readline()
            if not raw:
                return None
            encoding = getattr(self._stream, "encoding", None) or "utf-8"
            line = raw.decode(encoding, errors="replace")
        else:
            line = self._stream.readline()
            if line == "":
                return None
        return line.rstrip("\r\n")
