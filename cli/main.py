#!/usr/bin/env python3
"""
Soundboard CLI

Main entrypoint for the soundboard command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import replay
from soundboard.core import ActionKind, build_reducer
from soundboard.logging_config import setup_logging

app = typer.Typer(
    name="soundboard",
    help="Soundboard state engine CLI",
    add_completion=False,
)

console = Console()

app.command(name="replay")(replay.replay_command)


@app.command()
def kinds():
    """List action kinds and whether a transition is defined for each."""
    reducer = build_reducer()

    table = Table(title="Action Kinds")
    table.add_column("Kind", style="green")
    table.add_column("Transition", style="cyan")

    for kind in ActionKind:
        table.add_row(kind.value, "yes" if reducer.handles(kind) else "reserved")

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Soundboard CLI[/bold]", f"v{__version__}")
    table.add_row("Action kinds", str(len(ActionKind)))

    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
