"""pytest fixtures for memshim testing."""

import pytest

from ..adapters.outbound.graphiti import GraphChatMessageHistory, GraphMemory
from ..adapters.outbound.mem0 import Mem0ChatMessageHistory, Mem0Memory
from .fakes import FakeGraphClient, FakeMem0Client

TEST_USER_ID = "test-user"
TEST_SESSION_ID = "test-session"


# ============================================================================
# Fake Fixtures
# ============================================================================


@pytest.fixture
def fake_mem0() -> FakeMem0Client:
    """Provide a fake Mem0 client."""
    return FakeMem0Client()


@pytest.fixture
def fake_graph() -> FakeGraphClient:
    """Provide a fake Zep client."""
    return FakeGraphClient()


# ============================================================================
# Adapter Fixtures
# ============================================================================


@pytest.fixture
def mem0_history(fake_mem0: FakeMem0Client) -> Mem0ChatMessageHistory:
    return Mem0ChatMessageHistory(fake_mem0, TEST_USER_ID)


@pytest.fixture
def mem0_memory(fake_mem0: FakeMem0Client) -> Mem0Memory:
    return Mem0Memory(fake_mem0, TEST_USER_ID)


@pytest.fixture
def graph_history(fake_graph: FakeGraphClient) -> GraphChatMessageHistory:
    return GraphChatMessageHistory(fake_graph, TEST_SESSION_ID)


@pytest.fixture
def graph_memory(fake_graph: FakeGraphClient) -> GraphMemory:
    return GraphMemory(fake_graph, TEST_SESSION_ID)
