"""Username search tree.

An unbalanced binary search tree keyed by username with strict,
case-sensitive ordering. Signups in sorted order degrade it to a list,
so lookups are O(n) in the worst case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orbit.graph.types import User

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _TreeNode:
    key: str
    user: User
    left: _TreeNode | None = None
    right: _TreeNode | None = None


class UserSearchTree:
    """Name index over registered users.

    The tree references users owned by the social graph; it never copies them.
    """

    def __init__(self) -> None:
        self._root: _TreeNode | None = None
        self._size = 0

    def add_user(self, user: User) -> bool:
        """Insert a user under its name.

        Returns:
            False if the name already exists; the tree is left unchanged.
        """
        inserted = self._insert(user)
        if inserted:
            self._size += 1
        else:
            logger.warning("User '%s' already exists in the tree", user.name)
        return inserted

    def _insert(self, user: User) -> bool:
        if self._root is None:
            self._root = _TreeNode(user.name, user)
            return True

        node = self._root
        while True:
            if user.name < node.key:
                if node.left is None:
                    node.left = _TreeNode(user.name, user)
                    return True
                node = node.left
            elif user.name > node.key:
                if node.right is None:
                    node.right = _TreeNode(user.name, user)
                    return True
                node = node.right
            else:
                return False

    def find_user(self, name: str) -> User | None:
        return self._search(self._root, name)

    def _search(self, node: _TreeNode | None, name: str) -> User | None:
        if node is None:
            return None
        if name == node.key:
            return node.user
        if name < node.key:
            return self._search(node.left, name)
        return self._search(node.right, name)

    def list_users(self) -> list[User]:
        """All users in ascending name order (in-order traversal)."""
        users: list[User] = []
        self._in_order(self._root, users)
        return users

    def _in_order(self, node: _TreeNode | None, out: list[User]) -> None:
        if node is None:
            return
        self._in_order(node.left, out)
        out.append(node.user)
        self._in_order(node.right, out)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""

        def _height(node: _TreeNode | None) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_user(name) is not None
