"""Trace events emitted by build steps, compilers and test runners."""

import dataclasses
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Union

from .imports import ImportKind
from .status import TestOutcome
from .tags import KnownTag

MessageMapper = Callable[[str], str]


class TraceData:
    """Base of every trace event variant."""

    @property
    def message(self) -> str | None:
        """Text of message-carrying events, None for the others."""
        return None

    @property
    def new_line(self) -> bool | None:
        """Newline hint where the concept applies, None otherwise."""
        return None

    def map_message(self, f: MessageMapper) -> "TraceData":
        """Return the same variant with f applied to every redactable text field."""
        return self

    def replace(self, old: str, new: str) -> "TraceData":
        """Replace a literal substring in every redactable text field."""
        return self.map_message(lambda text: text.replace(old, new))


@dataclass(frozen=True)
class ImportData(TraceData):
    """Externally produced data of a known format at a path."""

    kind: ImportKind
    path: str


@dataclass(frozen=True)
class BuildNumber(TraceData):
    """Announces the build identifier."""

    text: str


@dataclass(frozen=True)
class ImportantMessage(TraceData):
    """A message that always ends with a line break."""

    text: str

    @property
    def message(self) -> str | None:
        """The event text."""
        return self.text

    @property
    def new_line(self) -> bool | None:
        """Always true: these messages end with a line break."""
        return True

    def map_message(self, f: MessageMapper) -> "ImportantMessage":
        """Rewrite the text."""
        return dataclasses.replace(self, text=f(self.text))


@dataclass(frozen=True)
class ErrorMessage(TraceData):
    """An error; routed like ImportantMessage."""

    text: str

    @property
    def message(self) -> str | None:
        """The event text."""
        return self.text

    @property
    def new_line(self) -> bool | None:
        """Always true: these messages end with a line break."""
        return True

    def map_message(self, f: MessageMapper) -> "ErrorMessage":
        """Rewrite the text."""
        return dataclasses.replace(self, text=f(self.text))


@dataclass(frozen=True)
class LogMessage(TraceData):
    """Normal informational output."""

    text: str
    append_new_line: bool = True

    @property
    def message(self) -> str | None:
        """The event text."""
        return self.text

    @property
    def new_line(self) -> bool | None:
        """The per-call newline flag."""
        return self.append_new_line

    def map_message(self, f: MessageMapper) -> "LogMessage":
        """Rewrite the text."""
        return dataclasses.replace(self, text=f(self.text))


@dataclass(frozen=True)
class TraceMessage(TraceData):
    """Verbose diagnostic output."""

    text: str
    append_new_line: bool = True

    @property
    def message(self) -> str | None:
        """The event text."""
        return self.text

    @property
    def new_line(self) -> bool | None:
        """The per-call newline flag."""
        return self.append_new_line

    def map_message(self, f: MessageMapper) -> "TraceMessage":
        """Rewrite the text."""
        return dataclasses.replace(self, text=f(self.text))


@dataclass(frozen=True)
class OpenTag(TraceData):
    """Start of a scope."""

    tag: KnownTag
    description: str = ""


@dataclass(frozen=True)
class CloseTag(TraceData):
    """End of a previously opened scope."""

    tag: KnownTag
    elapsed: timedelta


@dataclass(frozen=True)
class TestStatus(TraceData):
    """Outcome of a test that did not simply pass."""

    test_name: str
    status: TestOutcome

    def map_message(self, f: MessageMapper) -> "TestStatus":
        """Rewrite the texts of the nested outcome."""
        return dataclasses.replace(self, status=self.status.map_message(f))


@dataclass(frozen=True)
class TestOutput(TraceData):
    """Captured output of a test run."""

    test_name: str
    stdout: str
    stderr: str

    def map_message(self, f: MessageMapper) -> "TestOutput":
        """Rewrite both captured streams."""
        return dataclasses.replace(self, stdout=f(self.stdout), stderr=f(self.stderr))


TraceEvent = Union[
    ImportData,
    BuildNumber,
    ImportantMessage,
    ErrorMessage,
    LogMessage,
    TraceMessage,
    OpenTag,
    CloseTag,
    TestStatus,
    TestOutput,
]


def format_elapsed(elapsed: timedelta) -> str:
    """Render a duration as [-][d.]hh:mm:ss[.fffffff]."""
    sign = "-" if elapsed < timedelta(0) else ""
    elapsed = abs(elapsed)
    hours, rest = divmod(elapsed.seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if elapsed.days:
        text = f"{elapsed.days}.{text}"
    if elapsed.microseconds:
        text = f"{text}.{elapsed.microseconds * 10:07d}"
    return sign + text
