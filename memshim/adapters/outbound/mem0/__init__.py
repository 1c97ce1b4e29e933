"""
Mem0 Adapter Module.

This module contains ALL Mem0-specific code. It stores conversation
turns in the hosted Mem0 platform, scoped by user id, and returns the
facts Mem0 extracts as a leading system message.

Components:
    - Mem0Memory: Memory port implementation
    - Mem0ChatMessageHistory: ChatMessageHistory port implementation
    - Mem0MessageConverter: Converts messages bidirectionally
    - create_memory: Factory function for dynamic loading

Usage:
    from mem0 import MemoryClient
    from memshim.adapters.outbound.mem0 import Mem0Memory

    memory = Mem0Memory(MemoryClient(api_key="..."), "user-123")
    memory.save_context({"input": "Hi, I'm John"}, {"output": "Hello John!"})
"""

from ....infrastructure.config import DEFAULT_MEMORY_CONFIG, MemoryConfig
from ....infrastructure.options import MemoryOption
from ....infrastructure.settings import MemorySettings, load_settings
from .chat_history import Mem0ChatMessageHistory
from .client import create_client
from .memory import Mem0Memory
from .message_converter import Mem0MessageConverter
from .types import BACKEND_NAME, Mem0MemoryRecord, Mem0Message, Mem0Role


def create_memory(
    client=None,
    identifier: str | None = None,
    settings: MemorySettings | None = None,
    options: tuple[MemoryOption, ...] = (),
    config: MemoryConfig | None = None,
) -> Mem0Memory:
    """
    Factory function for creating a Mem0Memory.

    This is the convention-based entry point used by the adapter loader.

    Args:
        client: Mem0 client; built from settings when omitted
        identifier: User id; settings.default_user_id when omitted
        settings: Client settings; loaded from the environment when omitted
        options: Memory option appliers
        config: Base memory configuration

    Returns:
        Configured Mem0Memory instance
    """
    if client is None or identifier is None:
        settings = settings or load_settings()
    if client is None:
        client = create_client(settings)
    if identifier is None:
        identifier = settings.default_user_id

    return Mem0Memory(client, identifier, *options, config=config or DEFAULT_MEMORY_CONFIG)


__all__ = [
    "BACKEND_NAME",
    "Mem0Memory",
    "Mem0ChatMessageHistory",
    "Mem0MessageConverter",
    "Mem0Message",
    "Mem0MemoryRecord",
    "Mem0Role",
    "create_client",
    "create_memory",
]
