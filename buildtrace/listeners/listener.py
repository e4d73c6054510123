"""Trace listener contract."""

from typing import Protocol, runtime_checkable

from ..models import TraceData


@runtime_checkable
class ITraceListener(Protocol):
    """Consumes trace events. Must ignore variants it does not handle."""

    def write(self, event: TraceData) -> None:
        """Handle one trace event."""
        ...
