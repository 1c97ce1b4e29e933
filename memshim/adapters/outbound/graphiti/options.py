"""Graph memory configuration: the shared options plus the Zep memory type."""

from dataclasses import asdict, dataclass, replace
from typing import Any

from ....infrastructure.config import ChatHistoryConfig, MemoryConfig
from .types import GraphMemoryType

DEFAULT_MEMORY_TYPE = GraphMemoryType.PERPETUAL


@dataclass(frozen=True)
class GraphChatHistoryConfig(ChatHistoryConfig):
    memory_type: GraphMemoryType = DEFAULT_MEMORY_TYPE


@dataclass(frozen=True)
class GraphMemoryConfig(MemoryConfig):
    """MemoryConfig with the memory type requested from Zep."""

    memory_type: GraphMemoryType = DEFAULT_MEMORY_TYPE

    def chat_history_config(self) -> GraphChatHistoryConfig:
        return GraphChatHistoryConfig(
            human_prefix=self.human_prefix,
            ai_prefix=self.ai_prefix,
            memory_type=self.memory_type,
        )


DEFAULT_GRAPH_MEMORY_CONFIG = GraphMemoryConfig()
DEFAULT_GRAPH_CHAT_HISTORY_CONFIG = GraphChatHistoryConfig()


def as_graph_chat_history_config(config: ChatHistoryConfig) -> GraphChatHistoryConfig:
    """Promote a shared history config; the memory type falls back to PERPETUAL."""
    if isinstance(config, GraphChatHistoryConfig):
        return config
    return GraphChatHistoryConfig(**asdict(config))


def as_graph_memory_config(config: MemoryConfig) -> GraphMemoryConfig:
    """Promote a shared memory config; the memory type falls back to PERPETUAL."""
    if isinstance(config, GraphMemoryConfig):
        return config
    return GraphMemoryConfig(**asdict(config))


def with_memory_type(memory_type: GraphMemoryType | str):
    """
    Option for the Zep memory type.

    Graph-only: applies to GraphMemoryConfig and GraphChatHistoryConfig.

    Raises:
        ValueError: If memory_type is not a known GraphMemoryType
        TypeError: When applied to a config of another backend
    """
    memory_type = GraphMemoryType(memory_type)

    def apply(config: Any) -> Any:
        if not isinstance(config, (GraphMemoryConfig, GraphChatHistoryConfig)):
            raise TypeError(
                f"with_memory_type() only applies to graph memory, got {type(config).__name__}"
            )
        return replace(config, memory_type=memory_type)

    return apply
