"""
Entities - the framework-facing message model.

Backends never see these objects directly; each adapter converts them
to and from its own wire representation.
"""

from .chat_message import ChatMessage, ChatMessageType

__all__ = [
    "ChatMessage",
    "ChatMessageType",
]
