from __future__ import annotations

"""Simple settings loader with environment variables.

The ``get_settings`` function reads environment variables and caches the
resulting ``Settings`` object.  Values declared in a report specification
always take precedence over these process-wide defaults.  Tests may call
``reset_settings_cache`` to force a reload when they modify environment
variables at runtime.
"""

from dataclasses import dataclass
import os
from functools import lru_cache


@dataclass
class Settings:
    out_dir: str = "reports"
    seed: int = 42
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded from environment variables."""

    out_dir = os.getenv("EDA_OUT_DIR", "reports")
    seed = int(os.getenv("EDA_SEED", "42"))
    log_level = os.getenv("EDA_LOG_LEVEL", "INFO").upper()
    return Settings(out_dir=out_dir, seed=seed, log_level=log_level)


def reset_settings_cache() -> None:
    """Clear the settings cache (mainly for tests)."""

    get_settings.cache_clear()
