"""
Testing utilities for memshim.

- fakes: in-memory stand-ins for the Mem0 and Zep clients
- builders: fluent builders for messages and backend records
- fixtures: pytest fixtures wiring fakes into adapters

Usage:
    from memshim.testing import FakeMem0Client

    memory = Mem0Memory(FakeMem0Client(), "user-1")
"""

from .builders import ChatMessageBuilder, GraphRecordBuilder, Mem0RecordBuilder
from .fakes import FakeApiError, FakeGraphClient, FakeGraphMemoryApi, FakeMem0Client

__all__ = [
    "FakeApiError",
    "FakeMem0Client",
    "FakeGraphClient",
    "FakeGraphMemoryApi",
    "ChatMessageBuilder",
    "Mem0RecordBuilder",
    "GraphRecordBuilder",
]
