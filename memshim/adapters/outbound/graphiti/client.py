"""Construction of the Zep client from settings."""

import logging

from ....infrastructure.settings import MemorySettings

logger = logging.getLogger(__name__)


def create_client(settings: MemorySettings):
    """
    Build a ``zep_python.client.Zep`` from settings.

    The SDK is an optional dependency (``pip install memshim[zep]``) and
    is imported only here.

    Raises:
        ImportError: If the zep-python package is not installed
        ValueError: If no API key is configured
    """
    try:
        from zep_python.client import Zep
    except ImportError as e:
        raise ImportError(
            "The graphiti backend requires the zep-python package. Install it with: pip install memshim[zep]"
        ) from e

    if not settings.zep_api_key:
        raise ValueError("ZEP_API_KEY environment variable is not set")

    kwargs = {"api_key": settings.zep_api_key}
    if settings.zep_base_url:
        kwargs["base_url"] = settings.zep_base_url

    logger.info("Creating zep client")
    return Zep(**kwargs)
