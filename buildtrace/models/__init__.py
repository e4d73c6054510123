"""Trace event data models."""

from .events import (
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
    TraceEvent,
    TraceMessage,
    format_elapsed,
)
from .imports import CoverageTool, DotNetCoverage, ImportFormat, ImportKind, NunitVersion
from .status import TestFailed, TestIgnored, TestOutcome
from .tags import Compilation, KnownTag, Other, Target, Task, Test, TestSuite

__all__ = [
    # Events
    "TraceData",
    "TraceEvent",
    "ImportData",
    "BuildNumber",
    "ImportantMessage",
    "ErrorMessage",
    "LogMessage",
    "TraceMessage",
    "OpenTag",
    "CloseTag",
    "TestStatus",
    "TestOutput",
    "format_elapsed",
    # Tags
    "KnownTag",
    "Task",
    "Target",
    "Compilation",
    "TestSuite",
    "Test",
    "Other",
    # Test outcomes
    "TestOutcome",
    "TestIgnored",
    "TestFailed",
    # Import kinds
    "ImportKind",
    "ImportFormat",
    "DotNetCoverage",
    "CoverageTool",
    "NunitVersion",
]
