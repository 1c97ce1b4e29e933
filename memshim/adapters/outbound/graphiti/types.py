"""Zep graph memory type definitions and constants."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

BACKEND_NAME = "graphiti"

NOT_FOUND_STATUS = 404


class GraphRoleType(Enum):
    """Message role types understood by Zep."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    FUNCTION = "function"
    TOOL = "tool"


class GraphMemoryType(Enum):
    """How Zep assembles the memory returned for a session."""

    PERPETUAL = "perpetual"
    SUMMARY_RETRIEVER = "summary_retriever"
    MESSAGE_WINDOW = "message_window"


class GraphMessage(BaseModel):
    """
    Message in Zep format.

    ``role_type`` drives the mapping; ``role`` is a free-form display
    label (the human or AI prefix).
    """

    role_type: str
    role: str | None = None
    content: str = ""

    model_config = ConfigDict(extra="ignore")


class GraphFact(BaseModel):
    fact: str = ""

    model_config = ConfigDict(extra="ignore")


class GraphSummary(BaseModel):
    content: str | None = None

    model_config = ConfigDict(extra="ignore")


class GraphMemoryRecord(BaseModel):
    """Memory returned by Zep for one session."""

    messages: list[GraphMessage] | None = None
    relevant_facts: list[GraphFact] | None = None
    facts: list[str] | None = None
    summary: GraphSummary | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def derived_fact(self) -> str:
        """Relevant facts (or plain facts) followed by the summary, one per line."""
        lines = [f.fact for f in self.relevant_facts or [] if f.fact]
        if not lines:
            lines = [fact for fact in self.facts or [] if fact]
        if self.summary is not None and self.summary.content:
            lines.append(self.summary.content)
        return "\n".join(lines)
