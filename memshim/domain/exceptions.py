"""Exceptions raised by memory adapters."""


class MemshimError(Exception):
    """Base exception for all memshim errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Remote call failures


class RemoteCallError(MemshimError):
    """Raised when a call to a remote memory backend fails."""

    operation = "call"

    def __init__(self, backend: str, identifier: str, reason: str | None = None):
        message = f"{backend} {self.operation} failed for {identifier!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"backend": backend, "identifier": identifier})
        self.backend = backend
        self.identifier = identifier


class RemoteFetchError(RemoteCallError):
    """Raised when listing or searching stored memories fails."""

    operation = "fetch"


class RemoteWriteError(RemoteCallError):
    """Raised when adding messages to a backend fails."""

    operation = "write"


class RemoteDeleteError(RemoteCallError):
    """Raised when deleting stored memories fails."""

    operation = "delete"


# Caller supplied values


class InvalidInputValuesError(MemshimError):
    """Raised when input or output values cannot yield a single string."""


class AmbiguousInputError(InvalidInputValuesError):
    """Raised when no key is configured and the values do not hold exactly one entry."""

    def __init__(self, count: int):
        if count == 0:
            message = "Invalid input values: 0 keys"
        else:
            message = "Invalid input values: multiple keys and no input key set"
        super().__init__(message, details={"count": count})
        self.count = count


class MissingKeyError(InvalidInputValuesError):
    """Raised when the configured key is absent from the values."""

    def __init__(self, key: str, available: list[str]):
        super().__init__(
            f"Invalid input values: {key} not in {available}",
            details={"key": key, "available": available},
        )
        self.key = key
        self.available = available


class InvalidInputValueError(InvalidInputValuesError):
    """Raised when the selected value is not a string."""

    def __init__(self, value: object):
        super().__init__(
            f"Invalid input values: input value {value!r} not string",
            details={"value_type": type(value).__name__},
        )
        self.value = value
