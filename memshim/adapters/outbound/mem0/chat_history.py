"""Chat message history stored in Mem0."""

from collections.abc import Sequence

from ....application.ports.remote_clients import Mem0Client
from ....domain.entities import ChatMessage
from ....domain.exceptions import RemoteDeleteError, RemoteFetchError, RemoteWriteError
from ....infrastructure.config import DEFAULT_CHAT_HISTORY_CONFIG, ChatHistoryConfig
from ....infrastructure.logging import LoggerAdapter, get_logger
from .message_converter import Mem0MessageConverter
from .types import BACKEND_NAME


class Mem0ChatMessageHistory:
    """
    Chat message history that stores messages in Mem0, scoped by user id.

    The client is shared, not owned: several histories for different
    users can use the same client. Nothing is cached locally.

    Example:
        history = Mem0ChatMessageHistory(client, "user-123")
        history.add_user_message("Hi, I'm John")
        history.messages()  # [ChatMessage(type=system, ...), ChatMessage(type=human, ...)]
    """

    def __init__(
        self,
        client: Mem0Client,
        user_id: str,
        config: ChatHistoryConfig = DEFAULT_CHAT_HISTORY_CONFIG,
    ) -> None:
        self._client = client
        self._user_id = user_id
        self._config = config
        self._logger = LoggerAdapter(
            get_logger(__name__), {"backend": BACKEND_NAME, "identifier": user_id}
        )
        self._converter = Mem0MessageConverter(logger=self._logger)

    @property
    def client(self) -> Mem0Client:
        return self._client

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def human_prefix(self) -> str:
        return self._config.human_prefix

    @property
    def ai_prefix(self) -> str:
        return self._config.ai_prefix

    def messages(self) -> list[ChatMessage]:
        """
        Return all messages stored for the user.

        Extracted memories come first as a single system message.

        Raises:
            RemoteFetchError: If get_all fails or returns something unparseable
        """
        self._logger.debug(f"Fetching mem0 memories for {self._user_id}")
        try:
            response = self._client.get_all(user_id=self._user_id)
            records = self._converter.records_from_response(response)
        except Exception as e:
            self._logger.error(f"Failed to fetch mem0 memories for {self._user_id}: {e}")
            raise RemoteFetchError(BACKEND_NAME, self._user_id, str(e)) from e

        return self._converter.from_mem0(records)

    def add_user_message(self, text: str) -> None:
        """Add a human message to the history."""
        self._add([ChatMessage.human(text)])

    def add_ai_message(self, text: str) -> None:
        """Add an AI message to the history."""
        self._add([ChatMessage.ai(text)])

    def add_message(self, message: ChatMessage) -> None:
        """Add a message of any type; system messages are not stored."""
        self._add([message])

    def clear(self) -> None:
        """
        Delete all memories for the user. Safe to call repeatedly.

        Raises:
            RemoteDeleteError: If delete_all fails
        """
        self._logger.debug(f"Deleting all mem0 memories for {self._user_id}")
        try:
            self._client.delete_all(user_id=self._user_id)
        except Exception as e:
            self._logger.error(f"Failed to delete mem0 memories for {self._user_id}: {e}")
            raise RemoteDeleteError(BACKEND_NAME, self._user_id, str(e)) from e

    def set_messages(self, messages: list[ChatMessage]) -> None:
        """Mem0 cannot overwrite a history in bulk; this does nothing."""
        return None

    def _add(self, messages: Sequence[ChatMessage]) -> None:
        mem0_messages = self._converter.to_mem0(messages)
        if not mem0_messages:
            return

        payload = [message.model_dump() for message in mem0_messages]
        self._logger.debug(f"Adding {len(payload)} message(s) to mem0 for {self._user_id}")
        try:
            self._client.add(payload, user_id=self._user_id)
        except Exception as e:
            self._logger.error(f"Failed to add mem0 messages for {self._user_id}: {e}")
            raise RemoteWriteError(BACKEND_NAME, self._user_id, str(e)) from e
