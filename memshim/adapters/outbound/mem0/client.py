"""Construction of the hosted Mem0 client from settings."""

import logging

from ....infrastructure.settings import MemorySettings

logger = logging.getLogger(__name__)


def create_client(settings: MemorySettings):
    """
    Build a ``mem0.MemoryClient`` from settings.

    The SDK is an optional dependency (``pip install memshim[mem0]``) and
    is imported only here.

    Raises:
        ImportError: If the mem0ai package is not installed
        ValueError: If no API key is configured
    """
    try:
        from mem0 import MemoryClient
    except ImportError as e:
        raise ImportError(
            "The mem0 backend requires the mem0ai package. Install it with: pip install memshim[mem0]"
        ) from e

    if not settings.mem0_api_key:
        raise ValueError("MEM0_API_KEY environment variable is not set")

    kwargs = {"api_key": settings.mem0_api_key}
    if settings.mem0_host:
        kwargs["host"] = settings.mem0_host
    if settings.mem0_org_id:
        kwargs["org_id"] = settings.mem0_org_id
    if settings.mem0_project_id:
        kwargs["project_id"] = settings.mem0_project_id

    logger.info("Creating mem0 client")
    return MemoryClient(**kwargs)
