"""Exceções compartilhadas."""

from .exceptions import (
    AuthenticationError,
    ConfigError,
    InterMcpError,
    RemoteApiError,
    StorageError,
    UnknownToolError,
)

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "InterMcpError",
    "RemoteApiError",
    "StorageError",
    "UnknownToolError",
]
