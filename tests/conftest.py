"""Shared pytest fixtures."""

from memshim.testing.fixtures import (  # noqa: F401
    fake_graph,
    fake_mem0,
    graph_history,
    graph_memory,
    mem0_history,
    mem0_memory,
)
