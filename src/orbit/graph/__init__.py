"""Social graph core.

Public API:
- SocialGraph: Node registry with connection queries and traversal
- UserSearchTree: Username search tree
- FollowRequests: Follow-request workflow

Types:
- User, GraphNode: Profile record and its graph vertex
- Post, Message, Notification: Per-user log entries
- MutualSuggestion: Friend suggestion with mutual-connection count
"""

from orbit.graph.graph import SocialGraph
from orbit.graph.requests import FollowRequests
from orbit.graph.search import UserSearchTree
from orbit.graph.traversal import bfs_traverse, dfs_traverse
from orbit.graph.types import (
    GraphNode,
    Message,
    MutualSuggestion,
    Notification,
    Post,
    User,
)

__all__ = [
    "FollowRequests",
    "GraphNode",
    "Message",
    "MutualSuggestion",
    "Notification",
    "Post",
    "SocialGraph",
    "User",
    "UserSearchTree",
    "bfs_traverse",
    "dfs_traverse",
]
