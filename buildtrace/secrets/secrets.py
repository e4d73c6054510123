"""Registry of secret values redacted from trace events."""

import threading
from dataclasses import dataclass
from typing import Protocol

from ..logging_config import get_logger
from ..models import TraceData

logger = get_logger(__name__)


@dataclass(frozen=True)
class TraceSecret:
    """A sensitive value and the text that replaces it."""

    value: str
    replacement: str


class ISecretRegistry(Protocol):
    """Holds secrets and redacts text and events with them."""

    def register(self, replacement: str, secret: str) -> None:
        """Register a secret, replacing any earlier entry for the same value."""
        ...

    def get_all(self) -> list[TraceSecret]:
        """Current secrets, most recently registered first."""
        ...

    def redact(self, event: TraceData) -> TraceData:
        """Apply every secret to the event's messages."""
        ...


class TraceSecrets:
    """Process-lifetime secret registry.

    Secrets are kept most-recent-first in an immutable tuple that is swapped
    under a lock, so readers always see a consistent snapshot.

    Replacements are applied in registry order and each step sees the output
    of the previous one. A replacement text containing another secret's value
    is therefore redacted again by that later secret.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._secrets: tuple[TraceSecret, ...] = ()

    def register(self, replacement: str, secret: str) -> None:
        """Register a secret, replacing any earlier entry for the same value."""
        if not secret:
            raise ValueError("Secret value must be a non-empty string")

        entry = TraceSecret(value=secret, replacement=replacement)
        with self._lock:
            kept = tuple(s for s in self._secrets if s.value != secret)
            self._secrets = (entry,) + kept
            count = len(self._secrets)
        logger.debug("Registered trace secret (%d active)", count)

    def get_all(self) -> list[TraceSecret]:
        """Current secrets, most recently registered first."""
        return list(self._secrets)

    def guard_message(self, text: str) -> str:
        """Replace every registered secret value in text."""
        for secret in self._secrets:
            text = text.replace(secret.value, secret.replacement)
        return text

    def redact(self, event: TraceData) -> TraceData:
        """Apply every secret to the event's messages."""
        for secret in self._secrets:
            event = event.replace(secret.value, secret.replacement)
        return event

    def clear(self) -> None:
        """Forget all secrets."""
        with self._lock:
            self._secrets = ()


default_secrets = TraceSecrets()


def register(replacement: str, secret: str) -> None:
    """Register a secret in the process-wide registry."""
    default_secrets.register(replacement, secret)


def get_all() -> list[TraceSecret]:
    """Secrets of the process-wide registry."""
    return default_secrets.get_all()


def guard_message(text: str) -> str:
    """Redact text with the process-wide registry."""
    return default_secrets.guard_message(text)
