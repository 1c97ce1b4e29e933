"""ConversationMemory - framework-facing memory over a chat message history."""

import logging
from typing import Any

from ...infrastructure.config import DEFAULT_MEMORY_CONFIG, MemoryConfig
from ..ports.chat_message_history import ChatMessageHistory
from .input_values import get_buffer_string, get_input_value

logger = logging.getLogger(__name__)


class ConversationMemory:
    """
    Memory that remembers the conversational back and forth directly.

    Wraps a ChatMessageHistory and implements the Memory port on top of
    it. Backend packages subclass this to build their own history from a
    client and identifier; any other history can be passed in directly.

    There is no state besides the configuration and the history handle:
    every call goes straight to the backend.

    Example:
        memory = ConversationMemory(history, MemoryConfig(memory_key="chat_history"))

        memory.save_context({"input": "hi"}, {"output": "hello"})
        memory.load_memory_variables()  # {"chat_history": [ChatMessage(...), ...]}
    """

    def __init__(
        self,
        chat_history: ChatMessageHistory,
        config: MemoryConfig = DEFAULT_MEMORY_CONFIG,
    ) -> None:
        self._chat_history = chat_history
        self._config = config

    @property
    def chat_history(self) -> ChatMessageHistory:
        return self._chat_history

    @property
    def config(self) -> MemoryConfig:
        return self._config

    def memory_variables(self) -> list[str]:
        """Return the memory key, the only variable this memory loads."""
        return [self._config.memory_key]

    def get_memory_key(self) -> str:
        return self._config.memory_key

    def load_memory_variables(self, inputs: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Return the previous chat messages stored in memory.

        If the backend extracted facts or a summary, they arrive as a
        leading system message. With ``return_messages`` the value is the
        list of ChatMessage; otherwise it is the buffer string built with
        the configured prefixes.

        Args:
            inputs: Chain inputs; unused, accepted for interface compatibility

        Returns:
            Mapping of the memory key to the history

        Raises:
            RemoteFetchError: If the history cannot be read
        """
        messages = self._chat_history.messages()

        if self._config.return_messages:
            return {self._config.memory_key: messages}

        buffer = get_buffer_string(
            messages,
            human_prefix=self._config.human_prefix,
            ai_prefix=self._config.ai_prefix,
        )
        return {self._config.memory_key: buffer}

    def save_context(self, inputs: dict[str, Any], outputs: dict[str, Any]) -> None:
        """
        Save a user message from the inputs and an AI message from the outputs.

        If the input or output key is not set, the corresponding mapping must
        contain exactly one entry. If it is set, the key must be present.
        Both values must be strings. Both are checked before anything is
        written; the user message is then added before the AI message.

        There is no rollback: if the AI message fails to save, the user
        message stays stored.

        Raises:
            InvalidInputValuesError: If a value cannot be extracted
            RemoteWriteError: If either write fails
        """
        user_text = get_input_value(inputs, self._config.input_key)
        ai_text = get_input_value(outputs, self._config.output_key)

        self._chat_history.add_user_message(user_text)
        self._chat_history.add_ai_message(ai_text)
        logger.debug("Saved turn to %s", type(self._chat_history).__name__)

    def clear(self) -> None:
        """Delete every stored message for this conversation."""
        self._chat_history.clear()
