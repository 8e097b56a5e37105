"""Configuration commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from orbit.cli.console import console, create_table, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: $ORBIT_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Inspect configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from orbit.config import ConfigError, load_config
        from orbit.config.paths import get_config_path

        expanded_path = path.expanduser() if path else get_config_path()

        if action not in ("show", "validate"):
            error(f"Unknown action: {action}")
            console.print("Valid actions: show, validate")
            raise typer.Exit(1)

        if not expanded_path.exists():
            error(f"Config file not found: {expanded_path}")
            raise typer.Exit(1)

        if action == "show":
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(expanded_path.read_text(), markup=False)
            return

        try:
            config_obj = load_config(expanded_path)
        except ConfigError as e:
            error("Configuration validation failed:")
            console.print(str(e), markup=False)
            raise typer.Exit(1) from None

        table = create_table(
            "Configuration Summary",
            [("Setting", "cyan"), ("Value", "green")],
        )
        policy = config_obj.passwords
        table.add_row(
            "Password policy",
            f"min {policy.min_length} chars"
            if policy.enforce
            else "[dim]not enforced[/dim]",
        )
        table.add_row("Login attempts", str(config_obj.login.max_attempts))
        table.add_row("Timezone", config_obj.clock.timezone or "local")
        table.add_row("Log level", config_obj.logging.level)

        success("Configuration is valid!")
        console.print()
        console.print(table)
