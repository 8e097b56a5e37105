"""Configuration module."""

from orbit.config.loader import get_default_config, load_config
from orbit.config.models import (
    ClockConfig,
    ConfigError,
    LoggingConfig,
    LoginConfig,
    OrbitConfig,
    PasswordPolicyConfig,
)
from orbit.config.paths import get_config_path, get_logs_path, get_orbit_home

__all__ = [
    "ClockConfig",
    "ConfigError",
    "LoggingConfig",
    "LoginConfig",
    "OrbitConfig",
    "PasswordPolicyConfig",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "get_orbit_home",
    "load_config",
]
