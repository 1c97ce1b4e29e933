"""Mem0-backed conversation memory."""

from ....application.ports.remote_clients import Mem0Client
from ....application.services.conversation_memory import ConversationMemory
from ....infrastructure.config import DEFAULT_MEMORY_CONFIG, MemoryConfig
from ....infrastructure.options import MemoryOption, apply_memory_options
from .chat_history import Mem0ChatMessageHistory


class Mem0Memory(ConversationMemory):
    """
    Conversation memory stored in Mem0 for one user.

    Loaded history starts with a system message holding the facts Mem0
    extracted, when there are any.

    Example:
        memory = Mem0Memory(
            client,
            "user-123",
            with_memory_key("chat_history"),
            with_human_prefix("User"),
            with_ai_prefix("Assistant"),
        )
    """

    def __init__(
        self,
        client: Mem0Client,
        user_id: str,
        *options: MemoryOption,
        config: MemoryConfig = DEFAULT_MEMORY_CONFIG,
    ) -> None:
        config = apply_memory_options(*options, base=config)
        history = Mem0ChatMessageHistory(client, user_id, config.chat_history_config())
        super().__init__(history, config)
        self._client = client
        self._user_id = user_id

    @property
    def client(self) -> Mem0Client:
        return self._client

    @property
    def user_id(self) -> str:
        return self._user_id
