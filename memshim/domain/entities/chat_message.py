"""Chat message entity exchanged with the conversational-agent framework."""

from dataclasses import dataclass
from enum import Enum


class ChatMessageType(Enum):
    """Kind of chat message, as understood by the framework."""

    SYSTEM = "system"
    HUMAN = "human"
    AI = "ai"
    TOOL = "tool"
    FUNCTION = "function"


@dataclass(frozen=True)
class ChatMessage:
    """
    A single message in a conversation history.

    The set of message types is closed (see ChatMessageType), so code that
    consumes messages can match on ``message.type`` exhaustively instead of
    probing for subclasses.

    Attributes:
        type: Which participant produced the message
        content: The message text
    """

    type: ChatMessageType
    content: str

    def __repr__(self) -> str:
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"ChatMessage(type={self.type.value}, content={preview!r})"

    @property
    def is_human(self) -> bool:
        return self.type == ChatMessageType.HUMAN

    @property
    def is_ai(self) -> bool:
        return self.type == ChatMessageType.AI

    @property
    def is_system(self) -> bool:
        return self.type == ChatMessageType.SYSTEM

    # Factory methods

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        """Create a system message."""
        return cls(type=ChatMessageType.SYSTEM, content=content)

    @classmethod
    def human(cls, content: str) -> "ChatMessage":
        """Create a human (user) message."""
        return cls(type=ChatMessageType.HUMAN, content=content)

    @classmethod
    def ai(cls, content: str) -> "ChatMessage":
        """Create an AI (assistant) message."""
        return cls(type=ChatMessageType.AI, content=content)

    @classmethod
    def tool(cls, content: str) -> "ChatMessage":
        """Create a tool result message."""
        return cls(type=ChatMessageType.TOOL, content=content)

    @classmethod
    def function(cls, content: str) -> "ChatMessage":
        """Create a function result message."""
        return cls(type=ChatMessageType.FUNCTION, content=content)
