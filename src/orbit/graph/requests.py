"""Follow-request workflow.

A request moves requester -> target's pending queue -> (on acceptance)
both nodes' connection queues. There is no rejection path: a pending entry
leaves the queue only by being accepted.
"""

from __future__ import annotations

import logging

from orbit.clock import Clock
from orbit.errors import OrdinalOutOfRangeError, UserNotFoundError
from orbit.graph.graph import SocialGraph
from orbit.graph.types import GraphNode

logger = logging.getLogger(__name__)


class FollowRequests:
    """Submits and accepts follow requests on a SocialGraph."""

    def __init__(self, graph: SocialGraph, clock: Clock) -> None:
        self._graph = graph
        self._clock = clock

    def send(self, requester: GraphNode | None, target: GraphNode | None) -> bool:
        """Queue ``requester`` on ``target``'s pending requests and notify target.

        Returns:
            True if the request was queued; False if either node is ``None``.

        Raises:
            UserNotFoundError: If either node is not registered in the graph.
        """
        if requester is None or target is None:
            logger.error("follow_request_null_node")
            return False
        for node in (requester, target):
            if self._graph.find_user(node.name) is not node:
                raise UserNotFoundError(node.name)

        target.pending_requests.enqueue(requester.name)
        target.user.notify(f"Follow request from {requester.name}", self._clock())
        logger.info(
            "follow_request_sent",
            extra={"requester": requester.name, "target": target.name},
        )
        return True

    def accept(self, target: GraphNode | None, ordinal: int) -> GraphNode | None:
        """Accept the pending request at a 1-based position.

        All other pending entries keep their relative order. Both nodes gain
        each other as a connection, the follower logs are updated and the
        requester is notified.

        Args:
            target: Node whose pending request is accepted.
            ordinal: 1-based position in ``target.pending_requests``.

        Returns:
            The requester's node, or None if ``target`` is ``None``.

        Raises:
            OrdinalOutOfRangeError: If no entry sits at ``ordinal``. Nothing
                is modified in that case.
        """
        if target is None:
            logger.error("follow_accept_null_node", extra={"ordinal": ordinal})
            return None
        pending = target.pending_requests
        if ordinal < 1 or ordinal > len(pending):
            logger.warning(
                "follow_request_ordinal_out_of_range",
                extra={"target": target.name, "ordinal": ordinal},
            )
            raise OrdinalOutOfRangeError(ordinal, len(pending))

        entries = pending.snapshot()
        handle = entries.pop(ordinal - 1)
        requester = self._graph.resolve(handle)

        pending.clear()
        for remaining in entries:
            pending.enqueue(remaining)

        target.connections.enqueue(requester.name)
        requester.connections.enqueue(target.name)

        target.user.followers.enqueue(requester.name)
        requester.user.following.enqueue(target.name)

        requester.user.notify(
            f"Follow request accepted by {target.name}", self._clock()
        )
        logger.info(
            "follow_request_accepted",
            extra={"requester": requester.name, "target": target.name},
        )
        return requester

    def is_pending(self, requester: GraphNode, target: GraphNode) -> bool:
        return requester.name in target.pending_requests
