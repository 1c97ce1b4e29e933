"""
Domain Layer - message model and error taxonomy.

This layer has no dependencies on backends, SDKs or configuration.
"""

from .entities import ChatMessage, ChatMessageType
from .exceptions import (
    AmbiguousInputError,
    InvalidInputValueError,
    InvalidInputValuesError,
    MemshimError,
    MissingKeyError,
    RemoteCallError,
    RemoteDeleteError,
    RemoteFetchError,
    RemoteWriteError,
)

__all__ = [
    "ChatMessage",
    "ChatMessageType",
    "MemshimError",
    "RemoteCallError",
    "RemoteFetchError",
    "RemoteWriteError",
    "RemoteDeleteError",
    "InvalidInputValuesError",
    "AmbiguousInputError",
    "MissingKeyError",
    "InvalidInputValueError",
]
