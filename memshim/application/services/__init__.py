"""
Application Services.

- ConversationMemory: the Memory port implemented over any ChatMessageHistory
- get_input_value / get_buffer_string: value extraction and rendering helpers
"""

from .conversation_memory import ConversationMemory
from .input_values import get_buffer_string, get_input_value

__all__ = [
    "ConversationMemory",
    "get_input_value",
    "get_buffer_string",
]
