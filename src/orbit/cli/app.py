"""Main CLI application."""

from typing import Annotated

import typer

from orbit.cli.commands import config, graph

app = typer.Typer(
    name="orbit",
    help="orbit - in-memory social graph explorer",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Explore a social network built from a TOML seed file."""
    ctx.obj = {"verbose": verbose}


config.register(app)
graph.register(app)


if __name__ == "__main__":
    app()
