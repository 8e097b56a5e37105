"""Password strength policy."""

from __future__ import annotations

from dataclasses import dataclass

from orbit.config.models import PasswordPolicyConfig
from orbit.errors import WeakPasswordError


@dataclass(frozen=True)
class PasswordPolicy:
    """Checks a password against length and character-class rules."""

    enforce: bool = True
    min_length: int = 8
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True
    special_chars: str = "@$!%*?&"

    @classmethod
    def from_config(cls, config: PasswordPolicyConfig) -> PasswordPolicy:
        return cls(**config.model_dump())

    def violations(self, password: str) -> list[str]:
        """List the rules ``password`` fails, empty if it passes."""
        problems: list[str] = []
        if len(password) < self.min_length:
            problems.append(f"be at least {self.min_length} characters long")
        if self.require_upper and not any(ch.isupper() for ch in password):
            problems.append("contain an uppercase letter")
        if self.require_lower and not any(ch.islower() for ch in password):
            problems.append("contain a lowercase letter")
        if self.require_digit and not any(ch.isdigit() for ch in password):
            problems.append("contain a number")
        if self.require_special and not any(
            ch in self.special_chars for ch in password
        ):
            problems.append(f"contain a special character ({self.special_chars})")
        return problems

    def validate(self, password: str) -> None:
        """Raise WeakPasswordError if enforced and ``password`` fails any rule."""
        if not self.enforce:
            return
        problems = self.violations(password)
        if problems:
            raise WeakPasswordError(problems)
