"""Trace listeners."""

from .console import (
    ColorMap,
    ConsoleColor,
    ConsoleTraceListener,
    ConsoleWriter,
    default_color_map,
)
from .listener import ITraceListener
from .logging_listener import LoggingTraceListener
from .memory import MemoryTraceListener

__all__ = [
    "ITraceListener",
    "ColorMap",
    "ConsoleColor",
    "ConsoleWriter",
    "ConsoleTraceListener",
    "default_color_map",
    "LoggingTraceListener",
    "MemoryTraceListener",
]
