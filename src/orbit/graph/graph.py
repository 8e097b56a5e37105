"""In-memory social graph index.

Nodes live in an arena keyed by username. Adjacency queues store usernames
and are resolved through the arena, so no node holds a direct reference to
another. Registry order is signup order.
"""

from __future__ import annotations

import logging

from orbit.graph.traversal import bfs_traverse, dfs_traverse
from orbit.graph.types import GraphNode, MutualSuggestion

logger = logging.getLogger(__name__)


class SocialGraph:
    """Registry of user nodes with accepted connections and pending requests."""

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}

    def add_user(self, node: GraphNode | None) -> bool:
        """Register a node.

        Args:
            node: Node to register. ``None`` is reported and ignored.

        Returns:
            True if the node was registered.
        """
        if node is None:
            logger.error("graph_add_null_node")
            return False
        if node.name in self._nodes:
            logger.warning("graph_duplicate_node", extra={"user.name": node.name})
            return False
        self._nodes[node.name] = node
        return True

    def find_user(self, name: str) -> GraphNode | None:
        return self._nodes.get(name)

    def resolve(self, handle: str) -> GraphNode:
        """Resolve a stored username to its node.

        Handles only enter adjacency queues for registered nodes, so a miss
        means the arena was corrupted.
        """
        return self._nodes[handle]

    def nodes(self) -> list[GraphNode]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self):
        return iter(list(self._nodes.values()))

    # -- Connection queries --

    def is_connected(self, a: GraphNode | None, b: GraphNode | None) -> bool:
        """True if ``b`` is among ``a``'s accepted connections."""
        if a is None or b is None:
            logger.error("graph_is_connected_null_node")
            return False
        return b.name in a.connections

    def count_mutual_connections(
        self, a: GraphNode | None, b: GraphNode | None
    ) -> int:
        """Count pairs of equal entries across both connection queues.

        Duplicate entries are counted once per pairing, so they inflate the
        result.
        """
        if a is None or b is None:
            logger.error("graph_mutual_count_null_node")
            return 0
        return sum(b.connections.count(handle) for handle in a.connections)

    def suggest_mutual_friends(self, node: GraphNode | None) -> list[MutualSuggestion]:
        """Suggest unconnected users that share connections with ``node``.

        Returns:
            Suggestions in registry order, only those with a positive count.
        """
        if node is None:
            logger.error("graph_suggest_null_node")
            return []
        suggestions: list[MutualSuggestion] = []
        for other in self._nodes.values():
            if other is node or self.is_connected(node, other):
                continue
            count = self.count_mutual_connections(node, other)
            if count > 0:
                suggestions.append(MutualSuggestion(other.name, count))
        return suggestions

    def connections_of(self, node: GraphNode | None) -> list[GraphNode]:
        if node is None:
            logger.error("graph_connections_null_node")
            return []
        return [self.resolve(handle) for handle in node.connections]

    def pending_requests_of(self, node: GraphNode | None) -> list[GraphNode]:
        if node is None:
            logger.error("graph_pending_requests_null_node")
            return []
        return [self.resolve(handle) for handle in node.pending_requests]

    # -- Traversal --

    def bfs(self, start: GraphNode | None) -> list[GraphNode]:
        return bfs_traverse(self, start)

    def dfs(self, start: GraphNode | None) -> list[GraphNode]:
        return dfs_traverse(self, start)
