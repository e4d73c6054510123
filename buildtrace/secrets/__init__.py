"""Secret registry module."""

from .secrets import (
    ISecretRegistry,
    TraceSecret,
    TraceSecrets,
    default_secrets,
    get_all,
    guard_message,
    register,
)

__all__ = [
    "ISecretRegistry",
    "TraceSecret",
    "TraceSecrets",
    "default_secrets",
    "get_all",
    "guard_message",
    "register",
]
