"""Breadth-first and depth-first traversal over accepted connections."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orbit.graph.graph import SocialGraph
    from orbit.graph.types import GraphNode

logger = logging.getLogger(__name__)


def bfs_traverse(graph: SocialGraph, start: GraphNode | None) -> list[GraphNode]:
    """Visit nodes level by level from ``start``.

    Neighbors are visited in the order their connections were accepted.
    A ``None`` start is logged and yields no traversal.
    """
    if start is None:
        logger.error("traversal_start_missing", extra={"traversal": "bfs"})
        return []

    visited: set[str] = {start.name}
    order: list[GraphNode] = []
    queue: deque[GraphNode] = deque([start])

    while queue:
        current = queue.popleft()
        order.append(current)
        for handle in current.connections:
            if handle not in visited:
                visited.add(handle)
                queue.append(graph.resolve(handle))

    return order


def dfs_traverse(graph: SocialGraph, start: GraphNode | None) -> list[GraphNode]:
    """Visit nodes depth-first (pre-order) from ``start``.

    Recursion depth grows with the longest unvisited path.
    """
    if start is None:
        logger.error("traversal_start_missing", extra={"traversal": "dfs"})
        return []

    visited: set[str] = set()
    order: list[GraphNode] = []

    def _visit(node: GraphNode) -> None:
        visited.add(node.name)
        order.append(node)
        for handle in node.connections:
            if handle not in visited:
                _visit(graph.resolve(handle))

    _visit(start)
    return order
