"""
Infrastructure Layer - Cross-cutting Concerns.

This layer contains infrastructure code that supports the adapters:
    - Memory configuration and option appliers
    - Client settings loaded from the environment
    - Logging setup
"""

from .config import (
    DEFAULT_CHAT_HISTORY_CONFIG,
    DEFAULT_MEMORY_CONFIG,
    ChatHistoryConfig,
    MemoryConfig,
    get_env,
)
from .logging import LoggerAdapter, get_logger, setup_logging
from .options import (
    apply_chat_history_options,
    apply_memory_options,
    with_ai_prefix,
    with_chat_history_ai_prefix,
    with_chat_history_human_prefix,
    with_human_prefix,
    with_input_key,
    with_memory_key,
    with_output_key,
    with_return_messages,
)
from .settings import MemorySettings, load_settings

__all__ = [
    "ChatHistoryConfig",
    "MemoryConfig",
    "DEFAULT_MEMORY_CONFIG",
    "DEFAULT_CHAT_HISTORY_CONFIG",
    "get_env",
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
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
    "MemorySettings",
    "load_settings",
]
