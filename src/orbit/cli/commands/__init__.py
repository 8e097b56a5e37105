"""CLI command modules."""

from orbit.cli.commands import config, graph

__all__ = ["config", "graph"]
