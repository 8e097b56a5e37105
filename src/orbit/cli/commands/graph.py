"""Graph inspection commands over a seeded network."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import click
import typer

from orbit.cli.console import console, create_table, dim, error

if TYPE_CHECKING:
    from orbit.graph import GraphNode
    from orbit.network import SocialNetwork

SeedArg = Annotated[Path, typer.Argument(help="Path to a TOML seed file")]
NameArg = Annotated[str, typer.Argument(help="Username")]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to configuration file"),
]


def _load_network(seed: Path, config_path: Path | None) -> SocialNetwork:
    from orbit.cli.seed import SeedError, load_network
    from orbit.config import ConfigError, load_config
    from orbit.logging import configure_logging

    try:
        config = load_config(config_path)
        ctx = click.get_current_context(silent=True)
        verbose = bool(ctx and ctx.obj and ctx.obj.get("verbose"))
        configure_logging(
            level="DEBUG" if verbose else config.logging.level,
            use_rich=config.logging.use_rich,
            log_to_file=config.logging.log_to_file,
            retention_days=config.logging.retention_days,
        )
        return load_network(seed.expanduser(), config)
    except (ConfigError, SeedError, FileNotFoundError) as e:
        error(str(e))
        raise typer.Exit(1) from None


def _require_node(network: SocialNetwork, name: str) -> GraphNode:
    node = network.find_user(name)
    if node is None:
        error(f"User not found: {name}")
        raise typer.Exit(1)
    return node


def register(app: typer.Typer) -> None:
    """Register graph inspection commands."""

    @app.command()
    def users(seed: SeedArg, config_path: ConfigOpt = None) -> None:
        """List all users in name order."""
        network = _load_network(seed, config_path)
        listed = network.list_users()
        if not listed:
            dim("No users found.")
            return

        table = create_table(
            f"Users ({len(listed)})",
            [
                ("Username", "bold"),
                ("City", ""),
                ("Followers", "cyan"),
                ("Following", "cyan"),
                ("Posts", "dim"),
            ],
        )
        for user in listed:
            table.add_row(
                user.name,
                user.city or "-",
                str(len(user.followers)),
                str(len(user.following)),
                str(len(user.posts)),
            )
        console.print(table)

    @app.command()
    def traverse(
        seed: SeedArg,
        name: NameArg,
        mode: Annotated[
            str,
            typer.Option("--mode", "-m", help="Traversal order: bfs or dfs"),
        ] = "bfs",
        config_path: ConfigOpt = None,
    ) -> None:
        """Print users reachable from NAME through accepted connections."""
        if mode not in ("bfs", "dfs"):
            error(f"Unknown mode: {mode}")
            raise typer.Exit(1)
        network = _load_network(seed, config_path)
        node = _require_node(network, name)
        order = network.bfs(node) if mode == "bfs" else network.dfs(node)
        console.print(f"{mode.upper()} Traversal: {' '.join(order)}", markup=False)

    @app.command()
    def suggest(seed: SeedArg, name: NameArg, config_path: ConfigOpt = None) -> None:
        """Suggest friends for NAME with their shared-connection counts."""
        network = _load_network(seed, config_path)
        node = _require_node(network, name)
        suggestions = network.suggest_mutual_friends(node)
        if not suggestions:
            dim(f"No suggestions for {name}.")
            return

        table = create_table(
            f"Mutual Friends Suggestions for {name}",
            [("Username", "bold"), ("Mutual Connections", "cyan")],
        )
        for suggestion in suggestions:
            table.add_row(suggestion.name, str(suggestion.mutual_count))
        console.print(table)

    @app.command()
    def connections(
        seed: SeedArg, name: NameArg, config_path: ConfigOpt = None
    ) -> None:
        """List accepted connections and pending requests for NAME."""
        network = _load_network(seed, config_path)
        node = _require_node(network, name)

        console.print(f"Connections for {name}:", markup=False)
        connected = network.connections(node)
        if not connected:
            dim("No connections.")
        for index, other in enumerate(connected, start=1):
            console.print(f"{index}. {other}", markup=False)

        console.print(f"Pending Follow Requests for {name}:", markup=False)
        pending = network.pending_requests(node)
        if not pending:
            dim("No pending requests.")
        for index, other in enumerate(pending, start=1):
            console.print(f"{index}. {other}", markup=False)
