"""Configuration models using Pydantic."""

import logging
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class PasswordPolicyConfig(BaseModel):
    """Rules applied to passwords at signup and reset."""

    enforce: bool = True
    min_length: int = Field(default=8, ge=1)
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True
    special_chars: str = "@$!%*?&"

    @field_validator("special_chars")
    @classmethod
    def _special_chars_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("special_chars must not be empty")
        return value


class LoginConfig(BaseModel):
    """Consecutive failed logins allowed before SocialNetwork.login locks."""

    max_attempts: int = Field(default=3, ge=1)


class ClockConfig(BaseModel):
    """Timestamp source.

    timezone is an IANA name; None uses the process-local time.
    """

    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    use_rich: bool = True
    log_to_file: bool = False
    retention_days: int = Field(default=7, ge=1)


class ConfigError(Exception):
    """Configuration error."""

    pass


class OrbitConfig(BaseModel):
    """Root configuration model."""

    passwords: PasswordPolicyConfig = Field(default_factory=PasswordPolicyConfig)
    login: LoginConfig = Field(default_factory=LoginConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
