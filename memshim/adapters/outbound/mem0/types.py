"""Mem0-specific type definitions and constants."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

BACKEND_NAME = "mem0"


class Mem0Role(Enum):
    """Message roles understood by Mem0."""

    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


class Mem0Message(BaseModel):
    """Message in Mem0 format."""

    role: str
    content: str = ""

    model_config = ConfigDict(extra="ignore")


class Mem0MemoryRecord(BaseModel):
    """
    Memory record returned by Mem0's get_all.

    ``memory`` is the fact Mem0 extracted from the stored messages.
    Records from the hosted API often carry only that text and no
    messages.
    """

    id: str | None = None
    user_id: str | None = None
    messages: list[Mem0Message] | None = Field(default=None)
    memory: str | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def derived_fact(self) -> str:
        return self.memory or ""
