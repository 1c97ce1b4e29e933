"""Chat message history stored in Zep graph memory."""

from collections.abc import Sequence

from ....application.ports.remote_clients import GraphClient
from ....domain.entities import ChatMessage
from ....domain.exceptions import RemoteDeleteError, RemoteFetchError, RemoteWriteError
from ....infrastructure.config import ChatHistoryConfig
from ....infrastructure.logging import LoggerAdapter, get_logger
from .message_converter import GraphMessageConverter
from .options import DEFAULT_GRAPH_CHAT_HISTORY_CONFIG, as_graph_chat_history_config
from .types import BACKEND_NAME, NOT_FOUND_STATUS, GraphMemoryType


def _is_not_found(error: Exception) -> bool:
    return getattr(error, "status_code", None) == NOT_FOUND_STATUS


class GraphChatMessageHistory:
    """
    Chat message history that stores messages in Zep, scoped by session id.

    Human and AI messages are sent with the configured prefixes as their
    role label. Loaded history starts with a system message holding the
    facts and summary Zep derived, when there are any.

    A session Zep does not know yet reads as empty and clears without
    error. A plain ChatHistoryConfig reads with the PERPETUAL memory type.

    Example:
        history = GraphChatMessageHistory(zep_client, "session-123")
        history.add_ai_message("Hello Sarah!")
    """

    def __init__(
        self,
        client: GraphClient,
        session_id: str,
        config: ChatHistoryConfig = DEFAULT_GRAPH_CHAT_HISTORY_CONFIG,
    ) -> None:
        self._client = client
        self._session_id = session_id
        self._config = as_graph_chat_history_config(config)
        self._logger = LoggerAdapter(
            get_logger(__name__), {"backend": BACKEND_NAME, "identifier": session_id}
        )
        self._converter = GraphMessageConverter(
            human_prefix=config.human_prefix,
            ai_prefix=config.ai_prefix,
            logger=self._logger,
        )

    @property
    def client(self) -> GraphClient:
        return self._client

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def human_prefix(self) -> str:
        return self._config.human_prefix

    @property
    def ai_prefix(self) -> str:
        return self._config.ai_prefix

    @property
    def memory_type(self) -> GraphMemoryType:
        return self._config.memory_type

    def messages(self) -> list[ChatMessage]:
        """
        Return the session's memory as ChatMessages.

        Raises:
            RemoteFetchError: If memory.get fails or returns something unparseable
        """
        self._logger.debug(
            f"Fetching zep memory for {self._session_id} ({self._config.memory_type.value})"
        )
        try:
            response = self._client.memory.get(
                self._session_id, memory_type=self._config.memory_type.value
            )
            record = self._converter.record_from_response(response)
        except Exception as e:
            if _is_not_found(e):
                self._logger.debug(f"No zep memory yet for {self._session_id}")
                return []
            self._logger.error(f"Failed to fetch zep memory for {self._session_id}: {e}")
            raise RemoteFetchError(BACKEND_NAME, self._session_id, str(e)) from e

        return self._converter.from_graph([record])

    def add_user_message(self, text: str) -> None:
        """Add a human message to the history."""
        self._add([ChatMessage.human(text)])

    def add_ai_message(self, text: str) -> None:
        """Add an AI message to the history."""
        self._add([ChatMessage.ai(text)])

    def add_message(self, message: ChatMessage) -> None:
        """Add a message of any type."""
        self._add([message])

    def clear(self) -> None:
        """
        Delete the session's memory. Safe to call repeatedly.

        Raises:
            RemoteDeleteError: If memory.delete fails for any reason other than
                the session not existing
        """
        self._logger.debug(f"Deleting zep memory for {self._session_id}")
        try:
            self._client.memory.delete(self._session_id)
        except Exception as e:
            if _is_not_found(e):
                self._logger.debug(f"Zep memory for {self._session_id} already deleted")
                return
            self._logger.error(f"Failed to delete zep memory for {self._session_id}: {e}")
            raise RemoteDeleteError(BACKEND_NAME, self._session_id, str(e)) from e

    def set_messages(self, messages: list[ChatMessage]) -> None:
        """Zep cannot overwrite a history in bulk; this does nothing."""
        return None

    def _add(self, messages: Sequence[ChatMessage]) -> None:
        graph_messages = self._converter.to_graph(messages)
        if not graph_messages:
            return

        payload = [message.model_dump(exclude_none=True) for message in graph_messages]
        self._logger.debug(f"Adding {len(payload)} message(s) to zep for {self._session_id}")
        try:
            self._client.memory.add(self._session_id, messages=payload)
        except Exception as e:
            self._logger.error(f"Failed to add zep messages for {self._session_id}: {e}")
            raise RemoteWriteError(BACKEND_NAME, self._session_id, str(e)) from e
