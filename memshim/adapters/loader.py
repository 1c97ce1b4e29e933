"""
Backend discovery for memshim memories.

Every package under ``memshim/adapters/outbound/`` is a backend, named
after its directory, that exports ``create_memory(**kwargs)``. Adding a
backend means adding such a package; nothing is registered by hand.

Usage:
    from memshim.adapters.loader import load_memory, list_backends

    memory = load_memory("mem0", client=mem0_client, identifier="user-123")
    list_backends()  # ["graphiti", "mem0"]
"""

import importlib
import logging
from pathlib import Path
from typing import Any

from ..application.ports.memory import Memory

logger = logging.getLogger(__name__)

ADAPTERS_PACKAGE = "memshim.adapters.outbound"


def load_memory(backend: str, **kwargs: Any) -> Memory:
    """
    Build a memory for the named backend.

    Args:
        backend: "mem0" or "graphiti"; case and surrounding spaces are ignored
        **kwargs: Forwarded to the backend's create_memory(): client,
            identifier (user id for mem0, session id for graphiti),
            settings, options and config

    Returns:
        The backend's Memory implementation

    Raises:
        ValueError: If no such backend exists, it has no create_memory(),
            or the kwargs do not fit its create_memory()
    """
    name = backend.lower().strip()
    module_path = f"{ADAPTERS_PACKAGE}.{name}"

    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        # A missing dependency inside an existing backend is not an unknown backend
        if e.name != module_path:
            raise
        known = ", ".join(list_backends()) or "none"
        raise ValueError(f"Unknown memory backend: '{name}' (known backends: {known})") from e

    factory = getattr(module, "create_memory", None)
    if factory is None:
        raise ValueError(f"Memory backend '{name}' does not export create_memory()")

    try:
        memory = factory(**kwargs)
    except TypeError as e:
        raise ValueError(f"Failed to create memory for '{name}': {e}") from e

    if not isinstance(memory, Memory):
        logger.warning(f"{type(memory).__name__} from backend '{name}' is not a complete Memory")

    logger.debug(f"Created {type(memory).__name__} for backend '{name}'")
    return memory


def list_backends() -> list[str]:
    """Names of the backend packages under the outbound adapters directory, sorted."""
    outbound_dir = Path(__file__).parent / "outbound"
    return sorted(
        path.name
        for path in outbound_dir.iterdir()
        if path.is_dir() and not path.name.startswith("_") and (path / "__init__.py").exists()
    )
