"""Tests for configuration loading and models."""

import pytest
from pydantic import ValidationError

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


class TestPasswordPolicyConfig:
    def test_defaults(self):
        config = PasswordPolicyConfig()
        assert config.enforce is True
        assert config.min_length == 8
        assert config.special_chars == "@$!%*?&"

    def test_min_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            PasswordPolicyConfig(min_length=0)

    def test_special_chars_not_empty(self):
        with pytest.raises(ValidationError):
            PasswordPolicyConfig(special_chars="")


class TestClockConfig:
    def test_defaults_to_local_time(self):
        assert ClockConfig().timezone is None

    def test_valid_timezone(self):
        assert ClockConfig(timezone="Asia/Karachi").timezone == "Asia/Karachi"

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError):
            ClockConfig(timezone="Mars/Olympus_Mons")


class TestOrbitConfig:
    def test_defaults(self):
        config = OrbitConfig()
        assert config.login == LoginConfig()
        assert config.login.max_attempts == 3
        assert config.logging == LoggingConfig()
        assert config.logging.level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            OrbitConfig(logging={"level": "LOUD"})


class TestLoadConfig:
    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text("""
[passwords]
min_length = 12
require_special = false

[login]
max_attempts = 5

[clock]
timezone = "UTC"
""")
        config = load_config(config_file)
        assert config.passwords.min_length == 12
        assert config.passwords.require_special is False
        assert config.login.max_attempts == 5
        assert config.clock.timezone == "UTC"

    def test_explicit_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.toml")

    def test_invalid_toml(self, tmp_path):
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("not valid toml [[[")
        with pytest.raises(ConfigError):
            load_config(invalid_file)

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[login]\nmax_attempts = 0\n")
        with pytest.raises(ConfigError, match="max_attempts"):
            load_config(config_file)

    def test_no_file_uses_defaults(self):
        assert load_config() == get_default_config()

    def test_finds_file_in_current_directory(self, tmp_path):
        (tmp_path / "orbit.toml").write_text("[login]\nmax_attempts = 7\n")
        assert load_config().login.max_attempts == 7

    def test_finds_file_in_orbit_home(self):
        home = get_orbit_home()
        home.mkdir(parents=True)
        (home / "config.toml").write_text("[login]\nmax_attempts = 9\n")
        assert load_config().login.max_attempts == 9


class TestPaths:
    def test_orbit_home_from_env(self, tmp_path):
        assert get_orbit_home() == (tmp_path / "orbit-home").resolve()
        assert get_config_path() == get_orbit_home() / "config.toml"
        assert get_logs_path() == get_orbit_home() / "logs"
