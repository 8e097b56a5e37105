"""Credential checks."""

from orbit.security.passwords import PasswordPolicy

__all__ = ["PasswordPolicy"]
