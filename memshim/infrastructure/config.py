"""Configuration management for memshim memories."""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


# ============================================================================
# Default Configuration
# ============================================================================

DEFAULT_MEMORY_KEY = "history"
DEFAULT_HUMAN_PREFIX = "Human"
DEFAULT_AI_PREFIX = "AI"

ENV_PREFIX = "MEMSHIM_"


def get_env(key: str, default: Any = None, cast: type = str) -> Any:
    """
    Get environment variable with type casting.

    Args:
        key: Environment variable name
        default: Default value if not set
        cast: Type to cast to (str, int, float, bool)

    Returns:
        Value from environment or default
    """
    value = os.getenv(key)

    if value is None:
        return default

    if cast is bool:
        return value.lower() in ("true", "1", "yes", "on")
    elif cast in (int, float):
        try:
            return cast(value)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid {cast.__name__} value for {key}: {value}, using default: {default}"
            )
            return default

    return value


@dataclass(frozen=True)
class ChatHistoryConfig:
    """
    Configuration for a chat message history.

    Attributes:
        human_prefix: Label attached to human messages
        ai_prefix: Label attached to AI messages
    """

    human_prefix: str = DEFAULT_HUMAN_PREFIX
    ai_prefix: str = DEFAULT_AI_PREFIX


@dataclass(frozen=True)
class MemoryConfig:
    """
    Configuration for a conversation memory.

    No validation happens here; odd combinations (for example identical
    human and AI prefixes) are accepted as given.

    Attributes:
        memory_key: Prompt variable the memory contributes
        human_prefix: Prefix for human lines in buffer-string mode
        ai_prefix: Prefix for AI lines in buffer-string mode
        return_messages: Return ChatMessage lists instead of a buffer string
        input_key: Key of the user text in save_context inputs ("" = sole entry)
        output_key: Key of the AI text in save_context outputs ("" = sole entry)

    Example:
        # Create with defaults
        config = MemoryConfig()

        # Create with custom values
        config = MemoryConfig(memory_key="chat_history", return_messages=False)

        # Load from environment
        config = MemoryConfig.from_env()
    """

    memory_key: str = DEFAULT_MEMORY_KEY
    human_prefix: str = DEFAULT_HUMAN_PREFIX
    ai_prefix: str = DEFAULT_AI_PREFIX
    return_messages: bool = True
    input_key: str = ""
    output_key: str = ""

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "MemoryConfig":
        """
        Load configuration from environment variables.

        Reads MEMORY_KEY, HUMAN_PREFIX, AI_PREFIX, RETURN_MESSAGES,
        INPUT_KEY and OUTPUT_KEY, each prefixed with ``prefix``. Unset
        variables keep their defaults.

        Example:
            export MEMSHIM_MEMORY_KEY=chat_history
            export MEMSHIM_RETURN_MESSAGES=false

            config = MemoryConfig.from_env()
        """
        defaults = cls()
        return cls(
            memory_key=get_env(f"{prefix}MEMORY_KEY", defaults.memory_key),
            human_prefix=get_env(f"{prefix}HUMAN_PREFIX", defaults.human_prefix),
            ai_prefix=get_env(f"{prefix}AI_PREFIX", defaults.ai_prefix),
            return_messages=get_env(
                f"{prefix}RETURN_MESSAGES", defaults.return_messages, cast=bool
            ),
            input_key=get_env(f"{prefix}INPUT_KEY", defaults.input_key),
            output_key=get_env(f"{prefix}OUTPUT_KEY", defaults.output_key),
        )

    def with_overrides(self, **kwargs: Any) -> "MemoryConfig":
        """
        Create a new config with overrides.

        Raises:
            TypeError: If a keyword does not name a config field
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"Unknown memory config fields: {unknown}")
        return replace(self, **kwargs)

    def chat_history_config(self) -> ChatHistoryConfig:
        """The history configuration implied by this memory's prefixes."""
        return ChatHistoryConfig(human_prefix=self.human_prefix, ai_prefix=self.ai_prefix)


DEFAULT_MEMORY_CONFIG = MemoryConfig()
DEFAULT_CHAT_HISTORY_CONFIG = ChatHistoryConfig()
