"""In-memory trace listener."""

import threading

from ..models import TraceData


class MemoryTraceListener:
    """Collects every event it receives, in order."""

    def __init__(self):
        self._lock = threading.Lock()
        self._events: list[TraceData] = []

    def write(self, event: TraceData) -> None:
        """Store the event."""
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[TraceData]:
        """Snapshot of the received events."""
        with self._lock:
            return list(self._events)

    @property
    def messages(self) -> list[str]:
        """Texts of the received message events."""
        return [e.message for e in self.events if e.message is not None]

    def clear(self) -> None:
        """Drop all stored events."""
        with self._lock:
            self._events.clear()
