"""SocialNetwork facade.

Front ends (the bundled CLI or any other caller) go through this class. It
wires the graph registry, the username search tree and the follow-request
workflow together and returns plain data for rendering; it never prints.
"""

from __future__ import annotations

import logging

from orbit.clock import Clock, system_clock
from orbit.config.models import OrbitConfig
from orbit.errors import (
    DuplicateNameError,
    InvalidCredentialsError,
    LoginLockedError,
    UserNotFoundError,
)
from orbit.graph import (
    FollowRequests,
    GraphNode,
    Message,
    MutualSuggestion,
    Notification,
    Post,
    SocialGraph,
    User,
    UserSearchTree,
)
from orbit.security import PasswordPolicy

logger = logging.getLogger(__name__)


class SocialNetwork:
    """In-memory social network for a single interactive session."""

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        password_policy: PasswordPolicy | None = None,
        max_login_attempts: int = 3,
    ) -> None:
        self._clock = clock or system_clock()
        self._password_policy = password_policy or PasswordPolicy()
        self._max_login_attempts = max_login_attempts
        self._failed_logins: dict[str, int] = {}
        self._graph = SocialGraph()
        self._search = UserSearchTree()
        self._requests = FollowRequests(self._graph, self._clock)

    @classmethod
    def from_config(
        cls, config: OrbitConfig, clock: Clock | None = None
    ) -> SocialNetwork:
        return cls(
            clock=clock or system_clock(config.clock.timezone),
            password_policy=PasswordPolicy.from_config(config.passwords),
            max_login_attempts=config.login.max_attempts,
        )

    @property
    def graph(self) -> SocialGraph:
        return self._graph

    @property
    def search_tree(self) -> UserSearchTree:
        return self._search

    @property
    def password_policy(self) -> PasswordPolicy:
        return self._password_policy

    # -- Accounts --

    def signup(
        self,
        name: str,
        password: str,
        recovery_question: str,
        recovery_answer: str,
        city: str,
    ) -> User:
        """Create a user and register it in the graph and the search tree.

        Raises:
            DuplicateNameError: If ``name`` is taken.
            WeakPasswordError: If the password policy rejects ``password``.
        """
        if name in self._graph:
            raise DuplicateNameError(name)
        self._password_policy.validate(password)

        user = User(
            name=name,
            password=password,
            recovery_question=recovery_question,
            recovery_answer=recovery_answer,
            city=city,
        )
        self._graph.add_user(GraphNode(user))
        self._search.add_user(user)
        logger.info("user_signed_up", extra={"user.name": name})
        return user

    def login(self, name: str, password: str) -> GraphNode:
        """Check credentials and stamp ``last_login``.

        After ``max_login_attempts`` consecutive failures the account refuses
        further attempts until the password is reset through
        ``recovery_question`` / ``check_recovery_answer`` / ``reset_password``.

        Raises:
            UserNotFoundError: If no user has this name.
            LoginLockedError: If the failed-attempt limit has been reached.
            InvalidCredentialsError: If the password does not match.
        """
        node = self._require(name)
        if self.login_attempts_remaining(name) == 0:
            raise LoginLockedError(name, self._max_login_attempts)
        if node.user.password != password:
            failures = self._failed_logins.get(name, 0) + 1
            self._failed_logins[name] = failures
            remaining = self._max_login_attempts - failures
            logger.warning(
                "login_failed",
                extra={"user.name": name, "attempts_remaining": remaining},
            )
            raise InvalidCredentialsError(
                f"Incorrect password. {remaining} attempts remaining.",
                attempts_remaining=remaining,
            )
        self._failed_logins.pop(name, None)
        node.user.last_login = self._clock()
        logger.info("user_logged_in", extra={"user.name": name})
        return node

    @property
    def max_login_attempts(self) -> int:
        return self._max_login_attempts

    def login_attempts_remaining(self, name: str) -> int:
        failures = self._failed_logins.get(name, 0)
        return max(self._max_login_attempts - failures, 0)

    def recovery_question(self, name: str) -> str:
        return self._require(name).user.recovery_question

    def check_recovery_answer(self, name: str, answer: str) -> bool:
        return self._require(name).user.recovery_answer == answer

    def reset_password(self, node: GraphNode | None, new_password: str) -> bool:
        """Replace a user's password and clear any login lockout.

        Returns:
            True if the password changed; False if ``node`` is ``None``.

        Raises:
            WeakPasswordError: If the password policy rejects ``new_password``.
        """
        if node is None:
            logger.error("password_reset_null_node")
            return False
        self._password_policy.validate(new_password)
        node.user.password = new_password
        self._failed_logins.pop(node.name, None)
        logger.info("password_reset", extra={"user.name": node.name})
        return True

    def find_user(self, name: str) -> GraphNode | None:
        return self._graph.find_user(name)

    def _require(self, name: str) -> GraphNode:
        node = self._graph.find_user(name)
        if node is None:
            raise UserNotFoundError(name)
        return node

    # -- Content --

    def create_post(self, user: User, content: str) -> Post:
        post = Post(content=content, author_name=user.name, timestamp=self._clock())
        user.posts.push(post)
        return post

    def send_message(self, from_user: User, to_user: User, content: str) -> Message:
        """Push a message onto the recipient's stack and notify them."""
        now = self._clock()
        message = Message(sender=from_user.name, content=content, timestamp=now)
        to_user.messages.push(message)
        to_user.notify(f"New message from {from_user.name}", now)
        return message

    # -- Follow requests --

    def send_follow_request(
        self, requester: GraphNode | None, target: GraphNode | None
    ) -> bool:
        """Queue a follow request; ``None`` nodes are reported and ignored.

        Raises:
            UserNotFoundError: If either node is not registered.
        """
        return self._requests.send(requester, target)

    def accept_follow_request(
        self, target: GraphNode | None, ordinal: int
    ) -> GraphNode | None:
        """Accept the pending request at a 1-based position.

        Returns None (after reporting it) when ``target`` is ``None``.

        Raises:
            OrdinalOutOfRangeError: If there is no request at ``ordinal``.
        """
        return self._requests.accept(target, ordinal)

    # -- Queries --

    def search_user(self, name: str) -> User | None:
        return self._search.find_user(name)

    def list_users(self) -> list[User]:
        return self._search.list_users()

    def followers(self, user: User) -> list[str]:
        return user.followers.snapshot()

    def following(self, user: User) -> list[str]:
        return user.following.snapshot()

    def newsfeed(self, user: User) -> list[Post]:
        """The user's own posts, newest first."""
        return user.posts.snapshot()

    def timeline(self, user: User) -> list[tuple[str, list[Post]]]:
        """Posts of followed users, grouped per author in follow order.

        Each author's posts are newest first.
        """
        timeline: list[tuple[str, list[Post]]] = []
        for name in user.following:
            node = self._graph.find_user(name)
            posts = node.user.posts.snapshot() if node else []
            timeline.append((name, posts))
        return timeline

    def notifications(self, user: User) -> list[Notification]:
        return user.notifications.snapshot()

    def messages(self, user: User) -> list[Message]:
        """Received messages, newest first."""
        return user.messages.snapshot()

    def connections(self, node: GraphNode | None) -> list[str]:
        return [n.name for n in self._graph.connections_of(node)]

    def pending_requests(self, node: GraphNode | None) -> list[str]:
        return [n.name for n in self._graph.pending_requests_of(node)]

    def is_connected(self, a: GraphNode | None, b: GraphNode | None) -> bool:
        return self._graph.is_connected(a, b)

    def count_mutual_connections(
        self, a: GraphNode | None, b: GraphNode | None
    ) -> int:
        return self._graph.count_mutual_connections(a, b)

    def suggest_mutual_friends(
        self, node: GraphNode | None
    ) -> list[MutualSuggestion]:
        return self._graph.suggest_mutual_friends(node)

    def bfs(self, start: GraphNode | None) -> list[str]:
        return [n.name for n in self._graph.bfs(start)]

    def dfs(self, start: GraphNode | None) -> list[str]:
        return [n.name for n in self._graph.dfs(start)]

    def profile_info(self, user: User) -> str:
        return user.profile_info()
