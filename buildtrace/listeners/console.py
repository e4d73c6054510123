"""Console trace listener with colored output and stream routing."""

import sys
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, Literal, TextIO

from ..models import (
    BuildNumber,
    CloseTag,
    ErrorMessage,
    ImportantMessage,
    ImportData,
    LogMessage,
    OpenTag,
    TestOutput,
    TestStatus,
    TraceData,
    TraceMessage,
    format_elapsed,
)

ColorMode = Literal["auto", "always", "never"]

RESET_FOREGROUND = "\x1b[39m"


class ConsoleColor(Enum):
    """Console foreground colors with their ANSI SGR codes."""

    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    DARK_YELLOW = 33
    DARK_BLUE = 34
    DARK_MAGENTA = 35
    DARK_CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97

    @property
    def sgr(self) -> str:
        """Escape sequence selecting this color."""
        return f"\x1b[{self.value}m"


ColorMap = Callable[[TraceData], ConsoleColor]


def default_color_map(event: TraceData) -> ConsoleColor:
    """Default mapping of events to console colors."""
    if isinstance(event, ImportantMessage):
        return ConsoleColor.YELLOW
    if isinstance(event, ErrorMessage):
        return ConsoleColor.RED
    if isinstance(event, LogMessage):
        return ConsoleColor.GRAY
    if isinstance(event, TraceMessage):
        return ConsoleColor.GREEN
    return ConsoleColor.GRAY


class ConsoleWriter:
    """Writes text to stdout/stderr under a temporary foreground color.

    Streams default to whatever sys.stdout/sys.stderr are at write time. The
    writer remembers the color it last set; None is the terminal default.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        colors: ColorMode = "auto",
    ):
        self._stdout = stdout
        self._stderr = stderr
        self._colors = colors
        self._foreground: ConsoleColor | None = None
        self._lock = threading.RLock()

    @property
    def foreground(self) -> ConsoleColor | None:
        """Color currently in effect."""
        return self._foreground

    def stream(self, to_stderr: bool) -> TextIO:
        """Target stream for a write."""
        if to_stderr:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def colors_enabled(self, stream: TextIO) -> bool:
        """Whether escape codes should be written to stream."""
        if self._colors == "always":
            return True
        if self._colors == "never":
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    @contextmanager
    def color(self, color: ConsoleColor, stream: TextIO) -> Iterator[None]:
        """Switch to color for the block, restoring the previous color on exit."""
        with self._lock:
            previous = self._foreground
            changed = previous is not color
            if changed:
                self._set_foreground(color, stream)
            try:
                yield
            finally:
                if changed:
                    self._set_foreground(previous, stream)

    def _set_foreground(self, color: ConsoleColor | None, stream: TextIO) -> None:
        self._foreground = color
        if self.colors_enabled(stream):
            stream.write(color.sgr if color is not None else RESET_FOREGROUND)

    def write(self, to_stderr: bool, color: ConsoleColor, new_line: bool, text: str) -> None:
        """Print text in color, optionally followed by a newline."""
        stream = self.stream(to_stderr)
        with self.color(color, stream):
            stream.write(text)
            if new_line:
                stream.write("\n")
            stream.flush()


class ConsoleTraceListener:
    """Writes trace events to the console.

    Args:
        important_messages_to_stderr: Route important and error messages to
            stderr instead of stdout.
        color_map: Maps each event to the color it is printed in.
        writer: Console writer; a fresh one on the process streams by default.
    """

    def __init__(
        self,
        important_messages_to_stderr: bool,
        color_map: ColorMap = default_color_map,
        writer: ConsoleWriter | None = None,
    ):
        self.important_messages_to_stderr = important_messages_to_stderr
        self._color_map = color_map
        self._writer = writer or ConsoleWriter()

    def write(self, event: TraceData) -> None:
        """Print the event. Test results, test output and build numbers are skipped."""
        if isinstance(event, (BuildNumber, TestStatus, TestOutput)):
            return

        color = self._color_map(event)
        writer = self._writer

        if isinstance(event, (ImportantMessage, ErrorMessage)):
            writer.write(self.important_messages_to_stderr, color, True, event.text)
        elif isinstance(event, (LogMessage, TraceMessage)):
            writer.write(False, color, event.append_new_line, event.text)
        elif isinstance(event, OpenTag):
            tag = event.tag
            writer.write(False, color, True, f"Starting {tag.type} '{tag.name}': {event.description}")
        elif isinstance(event, CloseTag):
            elapsed = format_elapsed(event.elapsed)
            writer.write(False, color, True, f"Finished '{event.tag.name}' in {elapsed}")
        elif isinstance(event, ImportData):
            writer.write(False, color, True, f"Import data '{event.kind}': {event.path}")
        # Unknown variants: nothing to print
