"""Memory port - what the agent framework expects from a memory provider."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Memory(Protocol):
    """
    Framework-facing memory interface.

    A memory contributes named variables to prompt construction and
    records each turn of the conversation.
    """

    def memory_variables(self) -> list[str]:
        """Names of the prompt variables this memory provides."""
        ...

    def load_memory_variables(self, inputs: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return the memory variables for the next prompt."""
        ...

    def save_context(self, inputs: dict[str, Any], outputs: dict[str, Any]) -> None:
        """Record one turn: the user input and the AI output."""
        ...

    def clear(self) -> None:
        """Forget everything stored for this conversation."""
        ...

    def get_memory_key(self) -> str:
        ...
