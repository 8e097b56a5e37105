"""Tests for the follow-request workflow."""

import logging

import pytest

from orbit.clock import Timestamp
from orbit.errors import OrdinalOutOfRangeError, UserNotFoundError
from orbit.graph import FollowRequests, GraphNode, SocialGraph, User


@pytest.fixture
def graph() -> SocialGraph:
    return SocialGraph()


@pytest.fixture
def requests(graph: SocialGraph, clock) -> FollowRequests:
    return FollowRequests(graph, clock)


class TestSend:
    def test_queues_request_and_notifies_target(self, graph, requests, add_node):
        amy, bob = add_node(graph, "amy"), add_node(graph, "bob")
        requests.send(bob, amy)

        assert amy.pending_requests.snapshot() == ["bob"]
        notification = amy.user.notifications.peek()
        assert notification.content == "Follow request from bob"
        assert notification.timestamp == Timestamp(2024, 3, 5, 9, 0)
        assert notification.is_read is False
        assert requests.is_pending(bob, amy)

    def test_unaccepted_request_creates_no_relationship(
        self, graph, requests, add_node
    ):
        amy, bob = add_node(graph, "amy"), add_node(graph, "bob")
        requests.send(bob, amy)

        assert not graph.is_connected(amy, bob)
        assert not graph.is_connected(bob, amy)
        assert amy.user.followers.is_empty()
        assert bob.user.following.is_empty()
        assert bob.user.notifications.is_empty()

    def test_none_node_is_reported_and_ignored(
        self, graph, requests, add_node, caplog
    ):
        amy = add_node(graph, "amy")
        with caplog.at_level(logging.ERROR, logger="orbit.graph.requests"):
            assert requests.send(None, amy) is False
            assert requests.send(amy, None) is False
        assert caplog.text.count("follow_request_null_node") == 2
        assert amy.pending_requests.is_empty()
        assert amy.user.notifications.is_empty()

    def test_unregistered_requester_is_rejected(self, graph, requests, add_node):
        amy = add_node(graph, "amy")
        stranger = GraphNode(User("stranger", "pw", "q", "a", "Lahore"))
        with pytest.raises(UserNotFoundError, match="stranger"):
            requests.send(stranger, amy)
        assert amy.pending_requests.is_empty()
        assert amy.user.notifications.is_empty()

    def test_unregistered_target_is_rejected(self, graph, requests, add_node):
        amy = add_node(graph, "amy")
        stranger = GraphNode(User("stranger", "pw", "q", "a", "Lahore"))
        with pytest.raises(UserNotFoundError, match="stranger"):
            requests.send(amy, stranger)
        assert stranger.pending_requests.is_empty()

class TestAccept:
    def test_accept_connects_both_directions(self, graph, requests, add_node):
        amy, bob = add_node(graph, "amy"), add_node(graph, "bob")
        requests.send(bob, amy)

        assert requests.accept(amy, 1) is bob
        assert graph.is_connected(amy, bob)
        assert graph.is_connected(bob, amy)
        assert amy.pending_requests.is_empty()

    def test_accept_updates_follow_logs_and_notifies_requester(
        self, graph, requests, add_node
    ):
        amy, bob = add_node(graph, "amy"), add_node(graph, "bob")
        requests.send(bob, amy)
        requests.accept(amy, 1)

        assert amy.user.followers.snapshot() == ["bob"]
        assert bob.user.following.snapshot() == ["amy"]
        assert amy.user.following.is_empty()
        assert bob.user.followers.is_empty()
        assert [n.content for n in bob.user.notifications] == [
            "Follow request accepted by amy"
        ]

    def test_accept_middle_ordinal_preserves_order(self, graph, requests, add_node):
        target = add_node(graph, "target")
        x, y, z = (add_node(graph, n) for n in ("x", "y", "z"))
        for requester in (x, y, z):
            requests.send(requester, target)

        assert requests.accept(target, 2) is y
        assert graph.is_connected(target, y)
        assert target.pending_requests.snapshot() == ["x", "z"]
        assert not graph.is_connected(target, x)
        assert not graph.is_connected(target, z)

    def test_accept_last_ordinal(self, graph, requests, add_node):
        target = add_node(graph, "target")
        x, y = add_node(graph, "x"), add_node(graph, "y")
        requests.send(x, target)
        requests.send(y, target)

        requests.accept(target, 2)
        assert target.pending_requests.snapshot() == ["x"]
        assert target.connections.snapshot() == ["y"]

    @pytest.mark.parametrize("ordinal", [0, -1, 3])
    def test_out_of_range_ordinal_changes_nothing(
        self, graph, requests, add_node, ordinal
    ):
        target = add_node(graph, "target")
        x, y = add_node(graph, "x"), add_node(graph, "y")
        requests.send(x, target)
        requests.send(y, target)

        with pytest.raises(OrdinalOutOfRangeError) as exc_info:
            requests.accept(target, ordinal)

        assert exc_info.value.ordinal == ordinal
        assert exc_info.value.pending == 2
        assert target.pending_requests.snapshot() == ["x", "y"]
        assert target.connections.is_empty()
        assert target.user.followers.is_empty()
        assert x.user.notifications.is_empty()

    def test_accept_with_no_pending_requests(self, graph, requests, add_node):
        target = add_node(graph, "target")
        with pytest.raises(OrdinalOutOfRangeError):
            requests.accept(target, 1)

    def test_pending_queue_identity_is_preserved(self, graph, requests, add_node):
        target = add_node(graph, "target")
        x, y = add_node(graph, "x"), add_node(graph, "y")
        requests.send(x, target)
        requests.send(y, target)
        pending = target.pending_requests

        requests.accept(target, 1)
        assert target.pending_requests is pending
        assert pending.snapshot() == ["y"]

    def test_accept_none_target_is_reported_and_ignored(self, requests, caplog):
        with caplog.at_level(logging.ERROR, logger="orbit.graph.requests"):
            assert requests.accept(None, 1) is None
        assert "follow_accept_null_node" in caplog.text
