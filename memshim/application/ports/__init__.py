"""
Ports - Interfaces for external systems.

Ports define how the adapters meet the outside world:

- Inbound: what the agent framework calls (Memory, ChatMessageHistory)
- Outbound: what the adapters call on each backend SDK
"""

from .chat_message_history import ChatMessageHistory
from .memory import Memory
from .remote_clients import GraphClient, GraphMemoryApi, Mem0Client

__all__ = [
    "ChatMessageHistory",
    "Memory",
    "Mem0Client",
    "GraphClient",
    "GraphMemoryApi",
]
