"""
Application Layer - ports and the backend-independent memory service.
"""

from .ports import ChatMessageHistory, GraphClient, Mem0Client, Memory
from .services import ConversationMemory, get_buffer_string, get_input_value

__all__ = [
    "ChatMessageHistory",
    "Memory",
    "Mem0Client",
    "GraphClient",
    "ConversationMemory",
    "get_input_value",
    "get_buffer_string",
]
