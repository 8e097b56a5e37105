"""Centralized path management for orbit.

Config and logs live under a single base directory, overridable with the
ORBIT_HOME environment variable (default: ~/.orbit).
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "ORBIT_HOME"


@lru_cache(maxsize=1)
def get_orbit_home() -> Path:
    """Get the base directory for orbit data.

    Resolution order:
    1. ORBIT_HOME environment variable (if set)
    2. ~/.orbit
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".orbit"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_orbit_home() / "config.toml"


def get_logs_path() -> Path:
    """Get the JSONL log directory."""
    return get_orbit_home() / "logs"
