"""Tests for Mem0ChatMessageHistory and Mem0Memory against the fake client."""

import logging

import pytest

from memshim.adapters.outbound.mem0 import Mem0ChatMessageHistory, Mem0Memory
from memshim.application.ports import ChatMessageHistory, Memory
from memshim.domain.entities import ChatMessage
from memshim.domain.exceptions import RemoteDeleteError, RemoteFetchError, RemoteWriteError
from memshim.infrastructure.config import ChatHistoryConfig
from memshim.infrastructure.options import (
    with_ai_prefix,
    with_human_prefix,
    with_memory_key,
    with_return_messages,
)
from memshim.testing import FakeMem0Client
from memshim.testing.fixtures import TEST_USER_ID

# =============================================================================
# Chat History
# =============================================================================


class TestMem0ChatMessageHistory:
    def test_implements_port(self, mem0_history):
        assert isinstance(mem0_history, ChatMessageHistory)

    def test_empty_history(self, mem0_history, fake_mem0):
        assert mem0_history.messages() == []
        assert fake_mem0.get_all_calls == [{"user_id": TEST_USER_ID}]

    def test_add_user_message(self, mem0_history, fake_mem0):
        mem0_history.add_user_message("Hello")

        assert fake_mem0.add_calls == [
            {"messages": [{"role": "user", "content": "Hello"}], "user_id": TEST_USER_ID}
        ]

    def test_add_ai_message(self, mem0_history, fake_mem0):
        mem0_history.add_ai_message("Hi there")

        assert fake_mem0.add_calls[0]["messages"] == [{"role": "assistant", "content": "Hi there"}]

    def test_messages_read_back(self, mem0_history):
        mem0_history.add_user_message("Hello")
        mem0_history.add_ai_message("Hi there")

        assert mem0_history.messages() == [ChatMessage.human("Hello"), ChatMessage.ai("Hi there")]

    def test_extracted_facts_lead(self, mem0_history, fake_mem0):
        fake_mem0.will_extract("Name is John")
        mem0_history.add_user_message("Hi, I'm John")

        messages = mem0_history.messages()

        assert messages[0] == ChatMessage.system("Name is John")
        assert messages[1] == ChatMessage.human("Hi, I'm John")

    def test_wrapped_results(self):
        fake = FakeMem0Client(wrap_results=True)
        history = Mem0ChatMessageHistory(fake, "u1")
        history.add_user_message("Hello")

        assert history.messages() == [ChatMessage.human("Hello")]

    def test_system_message_not_sent(self, mem0_history, fake_mem0, caplog):
        with caplog.at_level(logging.WARNING):
            mem0_history.add_message(ChatMessage.system("Be nice"))

        assert fake_mem0.add_count == 0
        assert "system" in caplog.text

    def test_add_tool_message(self, mem0_history, fake_mem0):
        mem0_history.add_message(ChatMessage.tool("42"))

        assert fake_mem0.add_calls[0]["messages"] == [{"role": "tool", "content": "42"}]

    def test_users_are_isolated(self, fake_mem0):
        alice = Mem0ChatMessageHistory(fake_mem0, "alice")
        bob = Mem0ChatMessageHistory(fake_mem0, "bob")
        alice.add_user_message("I'm Alice")

        assert bob.messages() == []
        assert alice.messages() == [ChatMessage.human("I'm Alice")]

    def test_clear(self, mem0_history, fake_mem0):
        mem0_history.add_user_message("Hello")

        mem0_history.clear()

        assert mem0_history.messages() == []
        assert fake_mem0.delete_all_calls == [{"user_id": TEST_USER_ID}]

    def test_clear_twice(self, mem0_history):
        mem0_history.clear()
        mem0_history.clear()

        assert mem0_history.messages() == []

    def test_set_messages_does_nothing(self, mem0_history, fake_mem0):
        mem0_history.set_messages([ChatMessage.human("ignored")])

        assert fake_mem0.add_count == 0
        assert mem0_history.messages() == []

    def test_prefix_properties(self, fake_mem0):
        history = Mem0ChatMessageHistory(fake_mem0, "u1", ChatHistoryConfig("User", "Bot"))

        assert history.human_prefix == "User"
        assert history.ai_prefix == "Bot"
        assert history.user_id == "u1"
        assert history.client is fake_mem0


class TestMem0ChatMessageHistoryErrors:
    def test_fetch_failure(self, mem0_history, fake_mem0):
        fake_mem0.will_fail("get_all")

        with pytest.raises(RemoteFetchError) as exc_info:
            mem0_history.messages()

        assert exc_info.value.backend == "mem0"
        assert exc_info.value.identifier == TEST_USER_ID
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_unparseable_response(self, mem0_history, fake_mem0, monkeypatch):
        monkeypatch.setattr(fake_mem0, "get_all", lambda **kwargs: "not a list")

        with pytest.raises(RemoteFetchError):
            mem0_history.messages()

    def test_write_failure(self, mem0_history, fake_mem0):
        fake_mem0.will_fail("add")

        with pytest.raises(RemoteWriteError):
            mem0_history.add_user_message("Hello")

    def test_delete_failure(self, mem0_history, fake_mem0):
        fake_mem0.will_fail("delete_all")

        with pytest.raises(RemoteDeleteError):
            mem0_history.clear()

    def test_failure_is_logged(self, mem0_history, fake_mem0, caplog):
        fake_mem0.will_fail("add")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RemoteWriteError):
                mem0_history.add_ai_message("Hi")

        record = caplog.records[-1]
        assert record.backend == "mem0"
        assert record.identifier == TEST_USER_ID


# =============================================================================
# Memory
# =============================================================================


class TestMem0Memory:
    def test_implements_port(self, mem0_memory):
        assert isinstance(mem0_memory, Memory)

    def test_default_configuration(self, mem0_memory):
        assert mem0_memory.get_memory_key() == "history"
        assert mem0_memory.memory_variables() == ["history"]
        assert mem0_memory.config.return_messages is True

    def test_save_then_load(self, mem0_memory, fake_mem0):
        fake_mem0.will_extract("Name is John")

        mem0_memory.save_context({"input": "Hi, I'm John"}, {"output": "Hello John!"})
        variables = mem0_memory.load_memory_variables({})

        assert variables == {
            "history": [
                ChatMessage.system("Name is John"),
                ChatMessage.human("Hi, I'm John"),
                ChatMessage.ai("Hello John!"),
            ]
        }

    def test_buffer_string_with_prefixes(self, fake_mem0):
        memory = Mem0Memory(
            fake_mem0,
            "u1",
            with_memory_key("chat_history"),
            with_return_messages(False),
            with_human_prefix("User"),
            with_ai_prefix("Assistant"),
        )
        memory.save_context({"input": "Hello"}, {"output": "Hi there"})

        assert memory.load_memory_variables() == {"chat_history": "User: Hello\nAssistant: Hi there"}

    def test_prefixes_reach_history(self, fake_mem0):
        memory = Mem0Memory(fake_mem0, "u1", with_human_prefix("User"))

        assert memory.chat_history.human_prefix == "User"
        assert memory.user_id == "u1"
        assert memory.client is fake_mem0

    def test_clear(self, mem0_memory):
        mem0_memory.save_context({"input": "a"}, {"output": "b"})
        mem0_memory.clear()

        assert mem0_memory.load_memory_variables() == {"history": []}
