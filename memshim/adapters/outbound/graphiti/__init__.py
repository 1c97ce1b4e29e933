"""
Graphiti Adapter Module.

This module contains ALL Zep-specific code. It stores conversation turns
in Zep's graph memory (built on Graphiti), scoped by session id, and
returns the facts and summary Zep derives as a leading system message.

Components:
    - GraphMemory: Memory port implementation
    - GraphChatMessageHistory: ChatMessageHistory port implementation
    - GraphMessageConverter: Converts messages bidirectionally
    - with_memory_type: Option selecting the Zep memory type
    - create_memory: Factory function for dynamic loading

Usage:
    from zep_python.client import Zep
    from memshim.adapters.outbound.graphiti import GraphMemory, GraphMemoryType, with_memory_type

    memory = GraphMemory(
        Zep(api_key="..."),
        "session-123",
        with_memory_type(GraphMemoryType.PERPETUAL),
    )
"""

from ....infrastructure.config import MemoryConfig
from ....infrastructure.settings import MemorySettings, load_settings
from .chat_history import GraphChatMessageHistory
from .client import create_client
from .memory import GraphMemory
from .message_converter import GraphMessageConverter
from .options import (
    DEFAULT_GRAPH_MEMORY_CONFIG,
    GraphChatHistoryConfig,
    GraphMemoryConfig,
    with_memory_type,
)
from .types import (
    BACKEND_NAME,
    GraphFact,
    GraphMemoryRecord,
    GraphMemoryType,
    GraphMessage,
    GraphRoleType,
    GraphSummary,
)


def create_memory(
    client=None,
    identifier: str | None = None,
    settings: MemorySettings | None = None,
    options: tuple = (),
    config: MemoryConfig | None = None,
) -> GraphMemory:
    """
    Factory function for creating a GraphMemory.

    This is the convention-based entry point used by the adapter loader.

    Args:
        client: Zep client; built from settings when omitted
        identifier: Session id; settings.default_session_id when omitted
        settings: Client settings; loaded from the environment when omitted
        options: Memory option appliers, including with_memory_type()
        config: Base memory configuration; a plain MemoryConfig is promoted

    Returns:
        Configured GraphMemory instance
    """
    if client is None or identifier is None:
        settings = settings or load_settings()
    if client is None:
        client = create_client(settings)
    if identifier is None:
        identifier = settings.default_session_id

    return GraphMemory(client, identifier, *options, config=config or DEFAULT_GRAPH_MEMORY_CONFIG)


__all__ = [
    "BACKEND_NAME",
    "GraphMemory",
    "GraphChatMessageHistory",
    "GraphMessageConverter",
    "GraphMemoryConfig",
    "GraphChatHistoryConfig",
    "GraphMemoryType",
    "GraphRoleType",
    "GraphMessage",
    "GraphMemoryRecord",
    "GraphFact",
    "GraphSummary",
    "with_memory_type",
    "create_client",
    "create_memory",
]
