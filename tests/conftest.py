"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def reset_process_state():
    """Keep the process-wide registries clean between tests."""
    from buildtrace.dispatch import default_dispatcher
    from buildtrace.secrets import default_secrets

    default_dispatcher.reset()
    default_secrets.clear()
    yield
    default_dispatcher.reset()
    default_secrets.clear()


@pytest.fixture
def secrets():
    """Create an empty secret registry."""
    from buildtrace.secrets import TraceSecrets

    return TraceSecrets()


@pytest.fixture
def memory_listener():
    """Create an in-memory listener."""
    from buildtrace.listeners import MemoryTraceListener

    return MemoryTraceListener()


@pytest.fixture
def console_writer():
    """Create a console writer on in-memory streams, without colors."""
    from buildtrace.listeners import ConsoleWriter

    return ConsoleWriter(stdout=io.StringIO(), stderr=io.StringIO(), colors="never")


@pytest.fixture
def console_listener(console_writer):
    """Create a console listener that keeps important messages on stdout."""
    from buildtrace.listeners import ConsoleTraceListener, default_color_map

    return ConsoleTraceListener(False, default_color_map, console_writer)


@pytest.fixture
def dispatcher(secrets, console_listener):
    """Create a dispatcher whose default listener is the console_listener fixture."""
    from buildtrace.dispatch import TraceDispatcher

    return TraceDispatcher(secrets, lambda: console_listener)
