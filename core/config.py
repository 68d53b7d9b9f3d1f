# =============================================================================
# core/config.py  —  Where the memory collections live
# =============================================================================
#
# Two collections, two roots:
#   - business: relative to the process's working directory (./memory)
#   - legacy:   relative to the user's home (~/.deal-desk/memory)
#
# Both can be overridden through the environment (or a .env file, which
# main.py and tools/mcp_server.py load with python-dotenv before calling
# this).  The roots are resolved ONCE, at startup, and the resulting
# MemoryConfig is passed into the search engine.  A root that doesn't exist
# is fine — it simply contributes zero records.
# =============================================================================

import os
from pathlib import Path

from core.models import MemoryConfig

BUSINESS_MEMORY_ENV = "DEAL_DESK_BUSINESS_MEMORY"
LEGACY_MEMORY_ENV = "DEAL_DESK_LEGACY_MEMORY"

DEFAULT_BUSINESS_ROOT = "memory"
DEFAULT_LEGACY_ROOT = "~/.deal-desk/memory"


def _resolve(raw: str) -> Path:
    return Path(raw).expanduser().resolve()


def load_memory_config() -> MemoryConfig:
    """Build a MemoryConfig from the environment.

    Relative paths resolve against the current working directory, so the
    business default lands next to wherever the server was started.
    """
    business = os.environ.get(BUSINESS_MEMORY_ENV) or DEFAULT_BUSINESS_ROOT
    legacy = os.environ.get(LEGACY_MEMORY_ENV) or DEFAULT_LEGACY_ROOT
    return MemoryConfig(business_root=_resolve(business), legacy_root=_resolve(legacy))


def server_environment(config: MemoryConfig) -> dict[str, str]:
    """Environment for a spawned tool server.

    Copies the current environment (the MCP stdio client otherwise passes
    only a small whitelist) and pins both memory roots to the absolute
    paths already resolved here, so the child's working directory can't
    change where notes are read from.
    """
    env = dict(os.environ)
    env[BUSINESS_MEMORY_ENV] = str(config.business_root)
    env[LEGACY_MEMORY_ENV] = str(config.legacy_root)
    return env
