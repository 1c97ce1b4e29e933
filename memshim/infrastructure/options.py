"""
Option appliers for memory and chat history configuration.

Each ``with_*`` function returns a callable that takes a config and
returns an updated copy. ``apply_*_options`` folds the callables over a
base config in order, so later options win.

Example:
    config = apply_memory_options(
        with_memory_key("chat_history"),
        with_return_messages(False),
    )
"""

from collections.abc import Callable
from dataclasses import replace
from typing import TypeVar

from .config import (
    DEFAULT_CHAT_HISTORY_CONFIG,
    DEFAULT_MEMORY_CONFIG,
    ChatHistoryConfig,
    MemoryConfig,
)

M = TypeVar("M", bound=MemoryConfig)

MemoryOption = Callable[[MemoryConfig], MemoryConfig]
ChatHistoryOption = Callable[[ChatHistoryConfig], ChatHistoryConfig]


# Memory options


def with_return_messages(return_messages: bool) -> MemoryOption:
    """Return ChatMessage lists (True) or a buffer string (False)."""
    return lambda config: replace(config, return_messages=return_messages)


def with_input_key(input_key: str) -> MemoryOption:
    return lambda config: replace(config, input_key=input_key)


def with_output_key(output_key: str) -> MemoryOption:
    return lambda config: replace(config, output_key=output_key)


def with_human_prefix(human_prefix: str) -> MemoryOption:
    """Human prefix; also sent as the role label by backends that store one."""
    return lambda config: replace(config, human_prefix=human_prefix)


def with_ai_prefix(ai_prefix: str) -> MemoryOption:
    """AI prefix; also sent as the role label by backends that store one."""
    return lambda config: replace(config, ai_prefix=ai_prefix)


def with_memory_key(memory_key: str) -> MemoryOption:
    return lambda config: replace(config, memory_key=memory_key)


def apply_memory_options(*options: Callable[[M], M], base: M = DEFAULT_MEMORY_CONFIG) -> M:
    config = base
    for option in options:
        config = option(config)
    return config


# Chat history options


def with_chat_history_human_prefix(human_prefix: str) -> ChatHistoryOption:
    return lambda config: replace(config, human_prefix=human_prefix)


def with_chat_history_ai_prefix(ai_prefix: str) -> ChatHistoryOption:
    return lambda config: replace(config, ai_prefix=ai_prefix)


def apply_chat_history_options(
    *options: ChatHistoryOption,
    base: ChatHistoryConfig = DEFAULT_CHAT_HISTORY_CONFIG,
) -> ChatHistoryConfig:
    config = base
    for option in options:
        config = option(config)
    return config
