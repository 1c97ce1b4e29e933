"""Zep-backed conversation memory."""

from collections.abc import Callable

from ....application.ports.remote_clients import GraphClient
from ....application.services.conversation_memory import ConversationMemory
from ....infrastructure.config import MemoryConfig
from ....infrastructure.options import apply_memory_options
from .chat_history import GraphChatMessageHistory
from .options import DEFAULT_GRAPH_MEMORY_CONFIG, GraphMemoryConfig, as_graph_memory_config
from .types import GraphMemoryType


class GraphMemory(ConversationMemory):
    """
    Conversation memory stored in Zep for one session.

    Accepts the shared memory options plus with_memory_type(). A plain
    MemoryConfig is accepted too and reads with the PERPETUAL memory type.

    Example:
        memory = GraphMemory(
            zep_client,
            "session-123",
            with_memory_key("chat_history"),
            with_human_prefix("User"),
            with_ai_prefix("Assistant"),
            with_memory_type(GraphMemoryType.PERPETUAL),
        )
    """

    def __init__(
        self,
        client: GraphClient,
        session_id: str,
        *options: Callable[[GraphMemoryConfig], GraphMemoryConfig],
        config: MemoryConfig = DEFAULT_GRAPH_MEMORY_CONFIG,
    ) -> None:
        config = apply_memory_options(*options, base=as_graph_memory_config(config))
        history = GraphChatMessageHistory(client, session_id, config.chat_history_config())
        super().__init__(history, config)
        self._client = client
        self._session_id = session_id

    @property
    def client(self) -> GraphClient:
        return self._client

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def memory_type(self) -> GraphMemoryType:
        return self._config.memory_type
