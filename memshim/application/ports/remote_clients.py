"""
Remote client ports - the slice of each backend SDK the adapters use.

The adapters only rely on the calls below, so any object with the same
shape works: the real SDK clients, or the fakes in memshim.testing.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Mem0Client(Protocol):
    """
    Hosted Mem0 client (``mem0.MemoryClient``).

    ``get_all`` returns either a list of memory records or a mapping with
    a ``"results"`` list, depending on the API version in use.
    """

    def add(self, messages: Sequence[dict[str, str]], **kwargs: Any) -> Any:
        ...

    def get_all(self, **kwargs: Any) -> Any:
        ...

    def delete_all(self, **kwargs: Any) -> Any:
        ...


@runtime_checkable
class GraphMemoryApi(Protocol):
    """Memory resource of a Zep client (``client.memory``)."""

    def add(self, session_id: str, *, messages: Sequence[Any], **kwargs: Any) -> Any:
        ...

    def get(self, session_id: str, **kwargs: Any) -> Any:
        ...

    def delete(self, session_id: str, **kwargs: Any) -> Any:
        ...


@runtime_checkable
class GraphClient(Protocol):
    """Zep client (``zep_python.client.Zep``)."""

    memory: GraphMemoryApi
