"""Error types raised by the social graph core."""


class OrbitError(Exception):
    """Base class for orbit errors."""


class EmptyContainerError(OrbitError, IndexError):
    """Pop, dequeue or peek on an empty container."""


class DuplicateNameError(OrbitError, ValueError):
    """A user with this name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"User '{name}' already exists")
        self.name = name


class UserNotFoundError(OrbitError, LookupError):
    """No user is registered under this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"User '{name}' not found")
        self.name = name


class InvalidCredentialsError(OrbitError, ValueError):
    """Password (or recovery answer) did not match."""

    def __init__(self, message: str, attempts_remaining: int | None = None) -> None:
        super().__init__(message)
        self.attempts_remaining = attempts_remaining


class LoginLockedError(OrbitError, PermissionError):
    """Too many failed logins; the password must be reset first."""

    def __init__(self, name: str, max_attempts: int) -> None:
        super().__init__(
            f"Too many failed login attempts for '{name}' ({max_attempts}); "
            "answer the recovery question to reset the password"
        )
        self.name = name
        self.max_attempts = max_attempts


class WeakPasswordError(OrbitError, ValueError):
    """Password does not satisfy the configured policy."""

    def __init__(self, violations: list[str]) -> None:
        super().__init__("Password must " + "; ".join(violations))
        self.violations = violations


class OrdinalOutOfRangeError(OrbitError, LookupError):
    """No pending follow request exists at the given 1-based position."""

    def __init__(self, ordinal: int, pending: int) -> None:
        super().__init__(
            f"No pending request at position {ordinal} ({pending} pending)"
        )
        self.ordinal = ordinal
        self.pending = pending
