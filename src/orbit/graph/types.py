"""User records, log entries and graph nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbit.clock import Timestamp
from orbit.containers import OrderedQueue, OrderedStack


@dataclass
class Post:
    """A post on the author's own feed."""

    content: str
    author_name: str
    timestamp: Timestamp

    def __str__(self) -> str:
        return f"Post by {self.author_name}: {self.content}\nTime: {self.timestamp}"


@dataclass
class Message:
    """A direct message, stored on the recipient's stack."""

    sender: str
    content: str
    timestamp: Timestamp
    is_read: bool = False  # No operation marks messages read yet

    def __str__(self) -> str:
        status = "Read" if self.is_read else "Unread"
        return f"[{self.sender}]: {self.content} ({status})"


@dataclass
class Notification:
    content: str
    timestamp: Timestamp
    is_read: bool = False

    def __str__(self) -> str:
        status = "Read" if self.is_read else "Unread"
        return f"{self.content} ({status})"


@dataclass(eq=False)
class User:
    """Profile entity created at signup.

    ``followers`` and ``following`` hold usernames, not User objects, so the
    record never aliases another user's state.
    """

    name: str
    password: str
    recovery_question: str
    recovery_answer: str
    city: str
    last_login: Timestamp | None = None
    posts: OrderedStack[Post] = field(default_factory=OrderedStack)
    messages: OrderedStack[Message] = field(default_factory=OrderedStack)
    notifications: OrderedQueue[Notification] = field(default_factory=OrderedQueue)
    followers: OrderedQueue[str] = field(default_factory=OrderedQueue)
    following: OrderedQueue[str] = field(default_factory=OrderedQueue)

    def notify(self, content: str, timestamp: Timestamp) -> Notification:
        notification = Notification(content=content, timestamp=timestamp)
        self.notifications.enqueue(notification)
        return notification

    def profile_info(self) -> str:
        last_login = str(self.last_login) if self.last_login else "never"
        return f"Username: {self.name}\nCity: {self.city}\nLast Login: {last_login}"

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, city={self.city!r})"


@dataclass(eq=False)
class GraphNode:
    """Vertex for one user.

    ``connections`` and ``pending_requests`` store usernames that the owning
    SocialGraph resolves back to nodes.
    """

    user: User
    connections: OrderedQueue[str] = field(default_factory=OrderedQueue)
    pending_requests: OrderedQueue[str] = field(default_factory=OrderedQueue)

    @property
    def name(self) -> str:
        return self.user.name

    def __repr__(self) -> str:
        return f"GraphNode({self.user.name!r})"


@dataclass(frozen=True)
class MutualSuggestion:
    """A non-connected user sharing at least one connection."""

    name: str
    mutual_count: int
