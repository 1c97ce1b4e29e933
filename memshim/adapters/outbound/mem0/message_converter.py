"""Message converter for Mem0."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from ....domain.entities import ChatMessage, ChatMessageType
from .types import Mem0MemoryRecord, Mem0Message, Mem0Role


class Mem0MessageConverter:
    """
    Converts messages between memshim and Mem0 formats.

    Handles bidirectional conversion:
    - to_mem0: ChatMessages to Mem0 messages for add()
    - from_mem0: Mem0 memory records back to ChatMessages

    Mem0 has no system role, so system messages are dropped on the way
    out. Unknown roles on the way in are dropped too. Both cases log a
    warning and never raise.

    Example:
        converter = Mem0MessageConverter()

        payload = [m.model_dump() for m in converter.to_mem0(messages)]
        client.add(payload, user_id="user-123")

        records = converter.records_from_response(client.get_all(user_id="user-123"))
        history = converter.from_mem0(records)
    """

    _TO_ROLE = {
        ChatMessageType.HUMAN: Mem0Role.USER,
        ChatMessageType.AI: Mem0Role.ASSISTANT,
        ChatMessageType.FUNCTION: Mem0Role.FUNCTION,
        ChatMessageType.TOOL: Mem0Role.TOOL,
    }

    _FROM_ROLE = {
        Mem0Role.USER.value: ChatMessageType.HUMAN,
        Mem0Role.ASSISTANT.value: ChatMessageType.AI,
        Mem0Role.TOOL.value: ChatMessageType.TOOL,
        Mem0Role.FUNCTION.value: ChatMessageType.TOOL,
    }

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def to_mem0(self, messages: Sequence[ChatMessage]) -> list[Mem0Message]:
        """
        Convert ChatMessages to Mem0 messages, preserving order.

        Args:
            messages: Messages to store

        Returns:
            Mem0 messages; unsupported message types are left out
        """
        mem0_messages = []
        for message in messages:
            role = self._TO_ROLE.get(message.type)
            if role is None:
                self._logger.warning(f"Unknown message type for mem0: {message.type.value}")
                continue
            mem0_messages.append(Mem0Message(role=role.value, content=message.content))
        return mem0_messages

    def from_mem0(self, records: Sequence[Mem0MemoryRecord]) -> list[ChatMessage]:
        """
        Convert Mem0 memory records to ChatMessages.

        Messages keep their record and position order. If any record carries
        an extracted memory, all of them are joined with newlines into one
        system message placed first.

        Args:
            records: Records from get_all, in the order returned

        Returns:
            History ready for a prompt
        """
        chat_messages = []
        for record in records:
            for message in record.messages or []:
                message_type = self._FROM_ROLE.get(message.role)
                if message_type is None:
                    self._logger.warning(f"Unknown role: {message.role}")
                    continue
                chat_messages.append(ChatMessage(type=message_type, content=message.content))

        facts = "\n".join(record.derived_fact for record in records if record.derived_fact)
        if facts:
            chat_messages.insert(0, ChatMessage.system(facts))

        return chat_messages

    def records_from_response(self, response: Any) -> list[Mem0MemoryRecord]:
        """
        Parse a get_all response into records.

        Accepts a list of records or a mapping with a ``"results"`` list.
        Records may be mappings or SDK objects.

        Raises:
            ValueError: If the response has an unexpected shape
        """
        if response is None:
            return []
        if isinstance(response, Mapping):
            if "results" not in response:
                raise ValueError(f"Unexpected mem0 response keys: {sorted(response.keys())}")
            response = response["results"] or []
        if isinstance(response, (str, bytes)) or not isinstance(response, Sequence):
            raise ValueError(f"Unexpected mem0 response type: {type(response).__name__}")

        try:
            return [
                Mem0MemoryRecord.model_validate(item, from_attributes=True) for item in response
            ]
        except ValidationError as e:
            raise ValueError(f"Invalid mem0 memory record: {e}") from e
