"""Message converter for Zep graph memory."""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from ....domain.entities import ChatMessage, ChatMessageType
from .types import GraphMemoryRecord, GraphMessage, GraphRoleType


class GraphMessageConverter:
    """
    Converts messages between memshim and Zep formats.

    Handles bidirectional conversion:
    - to_graph: ChatMessages to Zep messages for memory.add()
    - from_graph: Zep memories back to ChatMessages

    Unlike Mem0, Zep stores system messages, so they pass through in
    both directions. Human and AI messages carry the configured prefixes
    as their ``role`` label.
    """

    _TO_ROLE_TYPE = {
        ChatMessageType.SYSTEM: GraphRoleType.SYSTEM,
        ChatMessageType.HUMAN: GraphRoleType.USER,
        ChatMessageType.AI: GraphRoleType.ASSISTANT,
        ChatMessageType.FUNCTION: GraphRoleType.FUNCTION,
        ChatMessageType.TOOL: GraphRoleType.TOOL,
    }

    _FROM_ROLE_TYPE = {
        GraphRoleType.USER.value: ChatMessageType.HUMAN,
        GraphRoleType.ASSISTANT.value: ChatMessageType.AI,
        GraphRoleType.SYSTEM.value: ChatMessageType.SYSTEM,
        GraphRoleType.TOOL.value: ChatMessageType.TOOL,
        GraphRoleType.FUNCTION.value: ChatMessageType.TOOL,
    }

    def __init__(
        self,
        human_prefix: str = "Human",
        ai_prefix: str = "AI",
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self._human_prefix = human_prefix
        self._ai_prefix = ai_prefix
        self._logger = logger or logging.getLogger(__name__)

    def to_graph(self, messages: Sequence[ChatMessage]) -> list[GraphMessage]:
        """Convert ChatMessages to Zep messages, preserving order."""
        graph_messages = []
        for message in messages:
            role_type = self._TO_ROLE_TYPE.get(message.type)
            if role_type is None:
                self._logger.warning(f"Unknown message type for zep: {message.type.value}")
                continue
            graph_messages.append(
                GraphMessage(
                    role_type=role_type.value,
                    role=self._role_label(message.type),
                    content=message.content,
                )
            )
        return graph_messages

    def from_graph(self, records: Sequence[GraphMemoryRecord]) -> list[ChatMessage]:
        """
        Convert Zep memories to ChatMessages.

        Facts and summaries from all records are joined into one system
        message placed before the converted messages.
        """
        chat_messages = []
        for record in records:
            for message in record.messages or []:
                message_type = self._FROM_ROLE_TYPE.get(str(message.role_type))
                if message_type is None:
                    self._logger.warning(f"Unknown role type: {message.role_type}")
                    continue
                chat_messages.append(ChatMessage(type=message_type, content=message.content))

        facts = "\n".join(record.derived_fact for record in records if record.derived_fact)
        if facts:
            chat_messages.insert(0, ChatMessage.system(facts))

        return chat_messages

    def record_from_response(self, response: Any) -> GraphMemoryRecord:
        """
        Parse the result of memory.get() into a record.

        Raises:
            ValueError: If the response cannot be parsed
        """
        if response is None:
            return GraphMemoryRecord()
        try:
            return GraphMemoryRecord.model_validate(response, from_attributes=True)
        except ValidationError as e:
            raise ValueError(f"Invalid zep memory: {e}") from e

    def _role_label(self, message_type: ChatMessageType) -> str | None:
        if message_type == ChatMessageType.HUMAN:
            return self._human_prefix
        if message_type == ChatMessageType.AI:
            return self._ai_prefix
        return None
