"""Shared test fixtures and factories."""

from collections.abc import Callable
from pathlib import Path

import pytest

from orbit.clock import Timestamp
from orbit.graph import GraphNode, SocialGraph, User
from orbit.network import SocialNetwork

STRONG_PASSWORD = "Secret@123"

# =============================================================================
# Clock Fixtures
# =============================================================================


class FakeClock:
    """Deterministic clock that advances one minute per call."""

    def __init__(self, start: Timestamp | None = None) -> None:
        self.current = start or Timestamp(2024, 3, 5, 9, 0)

    def __call__(self) -> Timestamp:
        ts = self.current
        minute = ts.minute + 1
        hour = ts.hour + minute // 60
        self.current = Timestamp(ts.year, ts.month, ts.day, hour % 24, minute % 60)
        return ts


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# Graph Fixtures
# =============================================================================


def _make_user(name: str, **kwargs: str) -> User:
    defaults = {
        "password": STRONG_PASSWORD,
        "recovery_question": "First pet?",
        "recovery_answer": "cat",
        "city": "Lahore",
    }
    defaults.update(kwargs)
    return User(name=name, **defaults)


@pytest.fixture
def add_node() -> Callable[[SocialGraph, str], GraphNode]:
    """Factory registering a fresh node on a graph."""

    def _add(graph: SocialGraph, name: str) -> GraphNode:
        node = GraphNode(_make_user(name))
        graph.add_user(node)
        return node

    return _add


# =============================================================================
# Network Fixtures
# =============================================================================


@pytest.fixture
def network(clock: FakeClock) -> SocialNetwork:
    return SocialNetwork(clock=clock)


@pytest.fixture
def signup(network: SocialNetwork) -> Callable[..., GraphNode]:
    """Factory signing up a user and returning its graph node."""

    def _signup(name: str, password: str = STRONG_PASSWORD, city: str = "Lahore"):
        network.signup(name, password, "First pet?", "cat", city)
        node = network.find_user(name)
        assert node is not None
        return node

    return _signup


# =============================================================================
# CLI Test Helpers
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1", "COLUMNS": "120"})


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Seed with amy <-> bob, amy <-> cat, bob <-> dan and a pending eve -> amy."""
    path = tmp_path / "seed.toml"
    users = "\n".join(
        f"""
[[users]]
name = "{name}"
password = "{STRONG_PASSWORD}"
city = "Lahore"
"""
        for name in ("amy", "bob", "cat", "dan", "eve")
    )
    follows = """
[[follows]]
from = "bob"
to = "amy"
accept = true

[[follows]]
from = "cat"
to = "amy"
accept = true

[[follows]]
from = "dan"
to = "bob"
accept = true

[[follows]]
from = "eve"
to = "amy"
"""
    path.write_text(users + follows)
    return path


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point ORBIT_HOME at a temp dir so no real config is picked up."""
    from orbit.config.paths import ENV_VAR, get_orbit_home

    monkeypatch.setenv(ENV_VAR, str(tmp_path / "orbit-home"))
    monkeypatch.chdir(tmp_path)
    get_orbit_home.cache_clear()
    yield
    get_orbit_home.cache_clear()
