"""Fake implementations of the remote client ports for testing."""

from collections.abc import Sequence
from typing import Any


class FakeApiError(Exception):
    """Error carrying an HTTP status code, like the SDK API errors."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"status_code: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body


class _FailureInjection:
    """Mixin that lets tests make the next call to an operation fail."""

    def __init__(self) -> None:
        self._failures: dict[str, list[Exception]] = {}

    def will_fail(self, operation: str, error: Exception | None = None) -> "_FailureInjection":
        """Make the next call to ``operation`` raise ``error``."""
        self._failures.setdefault(operation, []).append(
            error or ConnectionError(f"{operation} unavailable")
        )
        return self

    def _maybe_fail(self, operation: str) -> None:
        pending = self._failures.get(operation)
        if pending:
            raise pending.pop(0)


class FakeMem0Client(_FailureInjection):
    """
    Fake implementation of the Mem0 client for testing.

    Each add() becomes one memory record holding the added messages. The
    record's extracted memory is empty unless configured with
    will_extract().

    Example:
        fake = FakeMem0Client()
        fake.will_extract("John likes hiking")
        fake.add([{"role": "user", "content": "I love hiking"}], user_id="user-1")

        fake.get_all(user_id="user-1")
        # [{"id": "mem-1", "user_id": "user-1", "messages": [...], "memory": "John likes hiking"}]
    """

    def __init__(self, wrap_results: bool = False) -> None:
        super().__init__()
        self._records: list[dict[str, Any]] = []
        self._extractions: list[str] = []
        self._wrap_results = wrap_results
        self.add_calls: list[dict[str, Any]] = []
        self.get_all_calls: list[dict[str, Any]] = []
        self.delete_all_calls: list[dict[str, Any]] = []

    @property
    def add_count(self) -> int:
        return len(self.add_calls)

    @property
    def records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def will_extract(self, memory: str) -> "FakeMem0Client":
        """Attach ``memory`` as the extracted fact of the next added record."""
        self._extractions.append(memory)
        return self

    def seed(self, record: dict[str, Any]) -> None:
        """Store a raw record without recording a call."""
        self._records.append(record)

    def add(self, messages: Sequence[dict[str, str]], **kwargs: Any) -> list[dict[str, Any]]:
        self.add_calls.append({"messages": list(messages), **kwargs})
        self._maybe_fail("add")

        record = {
            "id": f"mem-{len(self._records) + 1}",
            "user_id": kwargs.get("user_id"),
            "messages": [dict(m) for m in messages],
            "memory": self._extractions.pop(0) if self._extractions else "",
        }
        self._records.append(record)
        return [record]

    def get_all(self, **kwargs: Any) -> Any:
        self.get_all_calls.append(kwargs)
        self._maybe_fail("get_all")

        user_id = kwargs.get("user_id")
        results = [r for r in self._records if r.get("user_id") == user_id]
        if self._wrap_results:
            return {"results": results}
        return results

    def delete_all(self, **kwargs: Any) -> dict[str, str]:
        self.delete_all_calls.append(kwargs)
        self._maybe_fail("delete_all")

        user_id = kwargs.get("user_id")
        self._records = [r for r in self._records if r.get("user_id") != user_id]
        return {"message": "Memories deleted successfully!"}


class FakeGraphMemoryApi(_FailureInjection):
    """
    Fake of the Zep client's ``memory`` resource.

    Sessions come into existence on their first add(). get() and delete()
    on an unknown session raise a 404 FakeApiError, as Zep does.
    """

    def __init__(self) -> None:
        super().__init__()
        self._sessions: dict[str, dict[str, Any]] = {}
        self.add_calls: list[dict[str, Any]] = []
        self.get_calls: list[dict[str, Any]] = []
        self.delete_calls: list[str] = []

    def session(self, session_id: str) -> dict[str, Any]:
        return self._sessions.setdefault(
            session_id, {"messages": [], "relevant_facts": [], "summary": None}
        )

    def has_session(self, session_id: str) -> bool:
        return session_id in self._sessions

    def with_facts(self, session_id: str, *facts: str) -> "FakeGraphMemoryApi":
        self.session(session_id)["relevant_facts"].extend({"fact": f} for f in facts)
        return self

    def with_summary(self, session_id: str, summary: str) -> "FakeGraphMemoryApi":
        self.session(session_id)["summary"] = {"content": summary}
        return self

    def add(self, session_id: str, *, messages: Sequence[Any], **kwargs: Any) -> dict[str, Any]:
        self.add_calls.append({"session_id": session_id, "messages": list(messages), **kwargs})
        self._maybe_fail("add")

        self.session(session_id)["messages"].extend(dict(m) for m in messages)
        return {"ok": True}

    def get(self, session_id: str, **kwargs: Any) -> dict[str, Any]:
        self.get_calls.append({"session_id": session_id, **kwargs})
        self._maybe_fail("get")

        if session_id not in self._sessions:
            raise FakeApiError(404, f"session {session_id} not found")
        session = self._sessions[session_id]
        return {
            "messages": [dict(m) for m in session["messages"]],
            "relevant_facts": list(session["relevant_facts"]),
            "summary": session["summary"],
        }

    def delete(self, session_id: str, **kwargs: Any) -> dict[str, Any]:
        self.delete_calls.append(session_id)
        self._maybe_fail("delete")

        if session_id not in self._sessions:
            raise FakeApiError(404, f"session {session_id} not found")
        del self._sessions[session_id]
        return {"message": "OK"}


class FakeGraphClient:
    """
    Fake implementation of the Zep client for testing.

    Example:
        fake = FakeGraphClient()
        fake.memory.with_facts("session-1", "Sarah is an engineer")

        history = GraphChatMessageHistory(fake, "session-1")
        history.messages()  # [ChatMessage(type=system, content='Sarah is an engineer')]
    """

    def __init__(self) -> None:
        self.memory = FakeGraphMemoryApi()
