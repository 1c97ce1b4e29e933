"""ChatMessageHistory port - conversation history interface."""

from typing import Protocol, runtime_checkable

from ...domain.entities import ChatMessage


@runtime_checkable
class ChatMessageHistory(Protocol):
    """
    Storage port for a single conversation's messages.

    Implementations are scoped to one user or session when constructed
    and forward every call to their backend.

    Implementations:
        - Mem0ChatMessageHistory: Hosted Mem0, scoped by user id
        - GraphChatMessageHistory: Zep graph memory, scoped by session id
    """

    def messages(self) -> list[ChatMessage]:
        """
        Return the stored history, oldest first.

        Raises:
            RemoteFetchError: If the backend cannot be read
        """
        ...

    def add_user_message(self, text: str) -> None:
        """
        Append a human message.

        Raises:
            RemoteWriteError: If the backend rejects the write
        """
        ...

    def add_ai_message(self, text: str) -> None:
        """
        Append an AI message.

        Raises:
            RemoteWriteError: If the backend rejects the write
        """
        ...

    def add_message(self, message: ChatMessage) -> None:
        """Append a message of any type."""
        ...

    def clear(self) -> None:
        """
        Delete every stored message. Calling it on an empty history is fine.

        Raises:
            RemoteDeleteError: If the backend cannot delete
        """
        ...

    def set_messages(self, messages: list[ChatMessage]) -> None:
        """Replace the history. Hosted backends do not support this."""
        ...
