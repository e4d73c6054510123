"""Trace listener that forwards events to the logging system."""

import logging

from ..logging_config import get_logger
from ..models import (
    BuildNumber,
    CloseTag,
    ErrorMessage,
    ImportantMessage,
    ImportData,
    LogMessage,
    OpenTag,
    TestFailed,
    TestOutput,
    TestStatus,
    TraceData,
    TraceMessage,
    format_elapsed,
)


class LoggingTraceListener:
    """Emits one structured log record per trace event.

    Event fields go into the record's ``context`` so JSONFormatter renders
    them as a nested object.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or get_logger("buildtrace.events")

    def write(self, event: TraceData) -> None:
        level, summary, context = self._describe(event)
        if level is None:
            return
        context["event"] = type(event).__name__
        self._logger.log(level, summary, extra={"context": context})

    def _describe(self, event: TraceData) -> tuple[int | None, str, dict]:
        if isinstance(event, ImportantMessage):
            return logging.WARNING, event.text, {}
        if isinstance(event, ErrorMessage):
            return logging.ERROR, event.text, {}
        if isinstance(event, LogMessage):
            return logging.INFO, event.text, {}
        if isinstance(event, TraceMessage):
            return logging.DEBUG, event.text, {}
        if isinstance(event, BuildNumber):
            return logging.INFO, "build_number", {"build_number": event.text}
        if isinstance(event, ImportData):
            return logging.INFO, "import_data", {
                "kind": str(event.kind),
                "path": event.path,
            }
        if isinstance(event, OpenTag):
            return logging.INFO, "scope_started", {
                "tag_type": event.tag.type,
                "tag_name": event.tag.name,
                "description": event.description,
            }
        if isinstance(event, CloseTag):
            return logging.INFO, "scope_finished", {
                "tag_type": event.tag.type,
                "tag_name": event.tag.name,
                "elapsed": format_elapsed(event.elapsed),
            }
        if isinstance(event, TestStatus):
            status = event.status
            context = {"test_name": event.test_name, "message": status.message}
            if isinstance(status, TestFailed):
                context["details"] = status.details
                if status.expected_actual is not None:
                    context["expected"], context["actual"] = status.expected_actual
                return logging.ERROR, "test_failed", context
            return logging.INFO, "test_ignored", context
        if isinstance(event, TestOutput):
            return logging.DEBUG, "test_output", {
                "test_name": event.test_name,
                "stdout": event.stdout,
                "stderr": event.stderr,
            }
        return None, "", {}
