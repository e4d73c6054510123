"""Structured build trace events with redacted listener dispatch."""

from .config import BuildServer, TraceSettings, important_messages_to_stderr, load_settings
from .dispatch import (
    TraceDispatcher,
    add_listener,
    are_listeners_set,
    default_console_listener,
    get_listeners,
    post_message,
    set_listeners,
)
from .listeners import (
    ConsoleColor,
    ConsoleTraceListener,
    ConsoleWriter,
    ITraceListener,
    LoggingTraceListener,
    MemoryTraceListener,
    default_color_map,
)
from .logging_config import get_logger, setup_logging
from .models import TraceData, TraceEvent
from .secrets import TraceSecret, TraceSecrets, guard_message, register

__all__ = [
    # Config
    "BuildServer",
    "TraceSettings",
    "important_messages_to_stderr",
    "load_settings",
    "setup_logging",
    "get_logger",
    # Models
    "TraceData",
    "TraceEvent",
    # Secrets
    "TraceSecret",
    "TraceSecrets",
    "register",
    "guard_message",
    # Listeners
    "ITraceListener",
    "ConsoleColor",
    "ConsoleWriter",
    "ConsoleTraceListener",
    "default_color_map",
    "LoggingTraceListener",
    "MemoryTraceListener",
    # Dispatch
    "TraceDispatcher",
    "are_listeners_set",
    "get_listeners",
    "set_listeners",
    "add_listener",
    "default_console_listener",
    "post_message",
]
