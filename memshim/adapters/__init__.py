"""
Adapters Layer - backend implementations of the memory ports.

Outbound adapters live under ``outbound/<backend>/`` and are found by
the loader by name.
"""

from .loader import list_backends, load_memory

__all__ = [
    "load_memory",
    "list_backends",
]
