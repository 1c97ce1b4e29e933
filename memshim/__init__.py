"""
memshim - hosted memory backends for conversational agents.

Adapters that store conversation history in Mem0 or Zep graph memory
behind one Memory interface.

Quick start:
    from memshim import load_memory, with_memory_key

    memory = load_memory("mem0", identifier="user-123", options=(with_memory_key("chat_history"),))
    memory.save_context({"input": "Hi, I'm John"}, {"output": "Hello John!"})
    memory.load_memory_variables()
"""

from .adapters import list_backends, load_memory
from .adapters.outbound.graphiti import (
    GraphChatMessageHistory,
    GraphMemory,
    GraphMemoryType,
    with_memory_type,
)
from .adapters.outbound.mem0 import Mem0ChatMessageHistory, Mem0Memory
from .application import (
    ChatMessageHistory,
    ConversationMemory,
    Memory,
    get_buffer_string,
    get_input_value,
)
from .domain import (
    AmbiguousInputError,
    ChatMessage,
    ChatMessageType,
    InvalidInputValueError,
    InvalidInputValuesError,
    MemshimError,
    MissingKeyError,
    RemoteCallError,
    RemoteDeleteError,
    RemoteFetchError,
    RemoteWriteError,
)
from .infrastructure import (
    ChatHistoryConfig,
    MemoryConfig,
    MemorySettings,
    apply_chat_history_options,
    apply_memory_options,
    load_settings,
    setup_logging,
    with_ai_prefix,
    with_chat_history_ai_prefix,
    with_chat_history_human_prefix,
    with_human_prefix,
    with_input_key,
    with_memory_key,
    with_output_key,
    with_return_messages,
)

__version__ = "0.1.0"
__all__ = [
    # Messages
    "ChatMessage",
    "ChatMessageType",
    # Ports and service
    "Memory",
    "ChatMessageHistory",
    "ConversationMemory",
    "get_input_value",
    "get_buffer_string",
    # Backends
    "Mem0Memory",
    "Mem0ChatMessageHistory",
    "GraphMemory",
    "GraphChatMessageHistory",
    "GraphMemoryType",
    "load_memory",
    "list_backends",
    # Configuration
    "MemoryConfig",
    "ChatHistoryConfig",
    "MemorySettings",
    "load_settings",
    "setup_logging",
    "apply_memory_options",
    "apply_chat_history_options",
    "with_memory_key",
    "with_input_key",
    "with_output_key",
    "with_human_prefix",
    "with_ai_prefix",
    "with_return_messages",
    "with_chat_history_human_prefix",
    "with_chat_history_ai_prefix",
    "with_memory_type",
    # Errors
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
