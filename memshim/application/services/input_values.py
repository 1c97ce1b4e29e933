"""Helpers for turning memory inputs and histories into plain strings."""

from collections.abc import Mapping, Sequence
from typing import Any

from ...domain.entities import ChatMessage, ChatMessageType
from ...domain.exceptions import AmbiguousInputError, InvalidInputValueError, MissingKeyError


def get_input_value(values: Mapping[str, Any], key: str = "") -> str:
    """
    Pick the single string a memory should store from a values mapping.

    With a key, the value under that key is used. Without one, the mapping
    must contain exactly one entry and that entry's value is used.

    Args:
        values: Input or output values of a chain call
        key: Configured input/output key, "" for none

    Returns:
        The selected string

    Raises:
        MissingKeyError: If key is set but not in values
        AmbiguousInputError: If key is empty and values has 0 or 2+ entries
        InvalidInputValueError: If the selected value is not a string
    """
    if key:
        if key not in values:
            raise MissingKeyError(key, list(values.keys()))
        value = values[key]
    else:
        if len(values) != 1:
            raise AmbiguousInputError(len(values))
        value = next(iter(values.values()))

    if not isinstance(value, str):
        raise InvalidInputValueError(value)
    return value


def get_buffer_string(
    messages: Sequence[ChatMessage],
    human_prefix: str = "Human",
    ai_prefix: str = "AI",
) -> str:
    """
    Render messages as ``"<prefix>: <content>"`` lines joined by newlines.

    Human and AI messages use the given prefixes; the other types use
    their type name.
    """
    lines = []
    for message in messages:
        match message.type:
            case ChatMessageType.HUMAN:
                role = human_prefix
            case ChatMessageType.AI:
                role = ai_prefix
            case ChatMessageType.SYSTEM:
                role = "system"
            case ChatMessageType.FUNCTION:
                role = "function"
            case ChatMessageType.TOOL:
                role = "tool"
            case _:
                raise ValueError(f"Unsupported message type: {message.type!r}")
        lines.append(f"{role}: {message.content}")
    return "\n".join(lines)
