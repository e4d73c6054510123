"""Integration tests: producers, secrets, dispatcher and listeners together."""

import json
import logging
from datetime import timedelta
from logging.handlers import RotatingFileHandler

import pytest

from buildtrace import models
from buildtrace.config import TraceSettings
from buildtrace.dispatch import TraceDispatcher
from buildtrace.listeners import (
    ConsoleColor,
    ConsoleTraceListener,
    ConsoleWriter,
    LoggingTraceListener,
    MemoryTraceListener,
    default_color_map,
)
from buildtrace.logging_config import setup_logging


@pytest.fixture
def process_console(secrets):
    """Dispatcher whose default console listener writes to the process streams."""
    listener = ConsoleTraceListener(False, default_color_map, ConsoleWriter(colors="never"))
    return TraceDispatcher(secrets, lambda: listener)


class TestConsoleEndToEnd:
    """End-to-end console output."""

    def test_redacted_log_message(self, process_console, secrets, capsys):
        """Test that a registered secret never reaches stdout."""
        secrets.register("<redacted>", "secret123")

        event = models.LogMessage("token=secret123", True)
        process_console.post_message(event)

        captured = capsys.readouterr()
        assert captured.out == "token=<redacted>\n"
        assert captured.err == ""
        assert default_color_map(event) is ConsoleColor.GRAY

    def test_task_scope(self, process_console, capsys):
        """Test the start/finish lines of a task."""
        process_console.post_message(models.OpenTag(models.Task("build"), "compiling"))
        process_console.post_message(models.CloseTag(models.Task("build"), timedelta(seconds=5)))

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "Starting task 'build': compiling",
            "Finished 'build' in 00:00:05",
        ]

    def test_silent_events(self, process_console, capsys):
        """Test that test results and build numbers print nothing."""
        process_console.post_message(
            models.TestStatus("t1", models.TestFailed("assert failed", "...", ("1", "2")))
        )
        process_console.post_message(models.TestOutput("t1", "out", "err"))
        process_console.post_message(models.BuildNumber("42"))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_unbalanced_tags_tolerated(self, process_console, capsys):
        """Test that a close without an open is still printed."""
        process_console.post_message(models.CloseTag(models.Test("orphan"), timedelta(0)))
        assert capsys.readouterr().out == "Finished 'orphan' in 00:00:00\n"


class TestMultipleListeners:
    """Several sinks consuming the same stream."""

    def test_console_and_memory(self, process_console, secrets, capsys):
        """Test that added listeners run before the console listener."""
        memory = MemoryTraceListener()
        process_console.add_listener(memory)
        secrets.register("***", "hunter2")

        process_console.post_message(models.ErrorMessage("password hunter2 rejected"))

        assert memory.messages == ["password *** rejected"]
        assert capsys.readouterr().out == "password *** rejected\n"

    def test_logging_listener_writes_json(self, secrets, tmp_path):
        """Test that the logging listener ends up as JSON lines in the log file."""
        log_file = tmp_path / "logs" / "build.log"
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        setup_logging(log_level="DEBUG", log_file=log_file)
        try:
            dispatcher = TraceDispatcher(secrets, MemoryTraceListener)
            dispatcher.set_listeners([LoggingTraceListener()])
            secrets.register("***", "s3cret")

            dispatcher.post_message(models.ImportantMessage("uploading with s3cret"))

            for handler in logging.getLogger().handlers:
                handler.flush()
            lines = [json.loads(line) for line in log_file.read_text().splitlines()]
            event_lines = [l for l in lines if l["logger"] == "buildtrace.events"]
            assert event_lines[-1]["message"] == "uploading with ***"
            assert event_lines[-1]["level"] == "WARNING"
            assert event_lines[-1]["context"] == {"event": "ImportantMessage"}
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)


class TestSetupLogging:
    """Tests for setup_logging() driven by TraceSettings."""

    @pytest.fixture
    def root_logger(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        yield root
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

    def test_uses_settings(self, root_logger, tmp_path):
        """Test that level and log file come from the settings."""
        log_file = tmp_path / "trace.log"

        setup_logging(settings=TraceSettings(log_level="debug", log_file=log_file))

        assert root_logger.level == logging.DEBUG
        files = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert [h.baseFilename for h in files] == [str(log_file)]

    def test_arguments_override_settings(self, root_logger, tmp_path):
        """Test that explicit arguments win over the settings."""
        setup_logging(log_level="ERROR", settings=TraceSettings(log_level="DEBUG"))

        assert root_logger.level == logging.ERROR
        assert not any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers)
