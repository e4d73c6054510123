"""Dispatch module."""

from .dispatch import (
    ListenerFactory,
    TraceDispatcher,
    add_listener,
    are_listeners_set,
    create_default_console_listener,
    default_console_listener,
    default_dispatcher,
    get_listeners,
    post_message,
    set_listeners,
)

__all__ = [
    "ListenerFactory",
    "TraceDispatcher",
    "add_listener",
    "are_listeners_set",
    "create_default_console_listener",
    "default_console_listener",
    "default_dispatcher",
    "get_listeners",
    "post_message",
    "set_listeners",
]
