"""Redact-then-broadcast dispatch of trace events to listeners."""

import threading
from typing import Callable, Iterable

from pydantic import ValidationError

from ..config import TraceSettings, load_settings
from ..listeners import ConsoleTraceListener, ConsoleWriter, ITraceListener, default_color_map
from ..logging_config import get_logger
from ..models import TraceData
from ..secrets import ISecretRegistry, default_secrets

logger = get_logger(__name__)


ListenerFactory = Callable[[], ITraceListener]


def create_default_console_listener() -> ITraceListener:
    """Console listener configured from the environment.

    Invalid settings fall back to the defaults so events are still printed.
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        logger.warning("Invalid trace settings, using defaults: %s", e)
        settings = TraceSettings()
    return ConsoleTraceListener(
        settings.important_messages_to_stderr,
        default_color_map,
        ConsoleWriter(colors=settings.colors),
    )


class TraceDispatcher:
    """Listener registry and redact-then-broadcast entry point.

    The listener list is None until set explicitly; reads fall back to the
    default console listener without storing it. That listener is built on
    first use and kept for the life of the dispatcher.
    """

    def __init__(
        self,
        secrets: ISecretRegistry | None = None,
        console_listener_factory: ListenerFactory = create_default_console_listener,
    ):
        self._secrets = secrets if secrets is not None else default_secrets
        self._console_listener_factory = console_listener_factory
        self._default_listener: ITraceListener | None = None
        self._listeners: tuple[ITraceListener, ...] | None = None
        self._lock = threading.RLock()

    @property
    def secrets(self) -> ISecretRegistry:
        """Registry used to redact posted events."""
        return self._secrets

    def default_console_listener(self) -> ITraceListener:
        """The memoized default console listener."""
        with self._lock:
            if self._default_listener is None:
                self._default_listener = self._console_listener_factory()
            return self._default_listener

    def are_listeners_set(self) -> bool:
        """Whether listeners were ever set explicitly."""
        return self._listeners is not None

    def get_listeners(self) -> list[ITraceListener]:
        """Explicit listeners, or the default console listener when unset."""
        listeners = self._listeners
        if listeners is None:
            return [self.default_console_listener()]
        return list(listeners)

    def set_listeners(self, listeners: Iterable[ITraceListener]) -> None:
        """Replace the listener list."""
        items = tuple(listeners)
        for listener in items:
            if not isinstance(listener, ITraceListener):
                raise TypeError(f"Not a trace listener: {listener!r}")
        with self._lock:
            self._listeners = items
        logger.debug("Trace listeners set (%d)", len(items))

    def add_listener(self, listener: ITraceListener) -> None:
        """Put a listener in front of the current ones."""
        if not isinstance(listener, ITraceListener):
            raise TypeError(f"Not a trace listener: {listener!r}")
        with self._lock:
            self._listeners = (listener, *self.get_listeners())
            count = len(self._listeners)
        logger.debug("Trace listener added: %r (%d active)", listener, count)

    def reset(self) -> None:
        """Return to the never-configured state."""
        with self._lock:
            self._listeners = None

    def post_message(self, event: TraceData) -> None:
        """Redact the event and write it to every listener, in order."""
        message = self._secrets.redact(event)

        for listener in self.get_listeners():
            try:
                listener.write(message)
            except Exception as e:
                logger.error(
                    "Error in trace listener %r: %s", listener, e, exc_info=True
                )


default_dispatcher = TraceDispatcher(default_secrets)


def default_console_listener() -> ITraceListener:
    """Default console listener of the process-wide dispatcher."""
    return default_dispatcher.default_console_listener()


def are_listeners_set() -> bool:
    """Whether the process-wide listeners were set explicitly."""
    return default_dispatcher.are_listeners_set()


def get_listeners() -> list[ITraceListener]:
    """Listeners of the process-wide dispatcher."""
    return default_dispatcher.get_listeners()


def set_listeners(listeners: Iterable[ITraceListener]) -> None:
    """Replace the process-wide listeners."""
    default_dispatcher.set_listeners(listeners)


def add_listener(listener: ITraceListener) -> None:
    """Prepend a listener to the process-wide listeners."""
    default_dispatcher.add_listener(listener)


def post_message(event: TraceData) -> None:
    """Post an event through the process-wide dispatcher."""
    default_dispatcher.post_message(event)
