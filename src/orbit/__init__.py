"""orbit - in-memory social graph index."""

from orbit.clock import Timestamp
from orbit.containers import OrderedQueue, OrderedStack
from orbit.errors import (
    DuplicateNameError,
    EmptyContainerError,
    InvalidCredentialsError,
    LoginLockedError,
    OrbitError,
    OrdinalOutOfRangeError,
    UserNotFoundError,
    WeakPasswordError,
)
from orbit.network import SocialNetwork

__version__ = "0.1.0"

__all__ = [
    "DuplicateNameError",
    "EmptyContainerError",
    "InvalidCredentialsError",
    "LoginLockedError",
    "OrbitError",
    "OrderedQueue",
    "OrderedStack",
    "OrdinalOutOfRangeError",
    "SocialNetwork",
    "Timestamp",
    "UserNotFoundError",
    "WeakPasswordError",
]
