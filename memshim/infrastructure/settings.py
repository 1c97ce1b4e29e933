"""
Client settings for the hosted memory backends.

Environment variables:
    Mem0:
        MEM0_API_KEY - API key for the hosted Mem0 platform
        MEM0_HOST - Optional API host override
        MEM0_ORG_ID / MEM0_PROJECT_ID - Optional organization scoping

    Zep (graph memory):
        ZEP_API_KEY - API key for Zep Cloud
        ZEP_BASE_URL - Optional API base URL override

    Identifiers:
        MEMSHIM_DEFAULT_USER_ID - User id used when none is passed (Mem0)
        MEMSHIM_DEFAULT_SESSION_ID - Session id used when none is passed (Zep)

    Logging:
        MEMSHIM_LOG_LEVEL - Level for setup_logging() (default: INFO)

A ``.env`` file in the working directory is loaded first and never
overrides variables that are already set.
"""

from dataclasses import dataclass

from dotenv import load_dotenv

from .config import get_env


class EnvVars:
    """Environment variable names used by memshim."""

    MEM0_API_KEY = "MEM0_API_KEY"
    MEM0_HOST = "MEM0_HOST"
    MEM0_ORG_ID = "MEM0_ORG_ID"
    MEM0_PROJECT_ID = "MEM0_PROJECT_ID"

    ZEP_API_KEY = "ZEP_API_KEY"
    ZEP_BASE_URL = "ZEP_BASE_URL"

    DEFAULT_USER_ID = "MEMSHIM_DEFAULT_USER_ID"
    DEFAULT_SESSION_ID = "MEMSHIM_DEFAULT_SESSION_ID"
    LOG_LEVEL = "MEMSHIM_LOG_LEVEL"


@dataclass(frozen=True)
class MemorySettings:
    """Connection settings and fallback identifiers for both backends."""

    mem0_api_key: str | None = None
    mem0_host: str | None = None
    mem0_org_id: str | None = None
    mem0_project_id: str | None = None
    zep_api_key: str | None = None
    zep_base_url: str | None = None
    default_user_id: str = "default-user"
    default_session_id: str = "default-session"
    log_level: str = "INFO"


def load_settings(dotenv_path: str | None = None) -> MemorySettings:
    """Load settings from the environment (and ``.env``, if present)."""
    load_dotenv(dotenv_path=dotenv_path, override=False)

    defaults = MemorySettings()
    return MemorySettings(
        mem0_api_key=get_env(EnvVars.MEM0_API_KEY),
        mem0_host=get_env(EnvVars.MEM0_HOST),
        mem0_org_id=get_env(EnvVars.MEM0_ORG_ID),
        mem0_project_id=get_env(EnvVars.MEM0_PROJECT_ID),
        zep_api_key=get_env(EnvVars.ZEP_API_KEY),
        zep_base_url=get_env(EnvVars.ZEP_BASE_URL),
        default_user_id=get_env(EnvVars.DEFAULT_USER_ID, defaults.default_user_id),
        default_session_id=get_env(EnvVars.DEFAULT_SESSION_ID, defaults.default_session_id),
        log_level=get_env(EnvVars.LOG_LEVEL, defaults.log_level),
    )
