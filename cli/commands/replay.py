"""
Replay command: fold an action script over a fresh state
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from soundboard.config import TOGGLE_SOURCES, ReducerConfig
from soundboard.core import (
    ActionScriptError,
    AppState,
    CatalogEntry,
    MalformedPayloadError,
    build_reducer,
    compute_state_hash,
    redact_state,
)
from soundboard.replay import load_actions, replay

console = Console()


def replay_command(
    script: str = typer.Argument(..., help="Path to JSONL action script"),
    instruments: List[str] = typer.Option([], "--instrument", "-i", help="Instrument catalog entry (repeatable)"),
    visualizers: List[str] = typer.Option([], "--visualizer", "-v", help="Visualizer catalog entry (repeatable)"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Apply at most N actions"),
    toggle_source: str = typer.Option("payload", "--toggle-source", help="Toggle flags from 'payload' or 'state'"),
    commit_on_create: bool = typer.Option(False, "--commit-on-create", help="Commit and reset the song on CREATE_SONG"),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed action payloads"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action script and report the resulting state.

    Examples:
        soundboard replay actions.jsonl
        soundboard replay actions.jsonl -i piano -v bars --show-state
        soundboard replay actions.jsonl --until 10 --json
    """
    if toggle_source not in TOGGLE_SOURCES:
        console.print(f"[red]Error:[/red] --toggle-source must be one of {', '.join(TOGGLE_SOURCES)}")
        raise typer.Exit(2)

    config = ReducerConfig(
        toggle_source=toggle_source,
        commit_on_create=commit_on_create,
        strict_payloads=strict,
    )

    try:
        actions = load_actions(script)
        initial = AppState.initial(
            instruments=[CatalogEntry(name) for name in instruments],
            visualizers=[CatalogEntry(name) for name in visualizers],
        )
        result = replay(actions, build_reducer(config), state=initial, until=until)
    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Script not found", "path": script}))
        else:
            console.print(f"[red]Error: Script not found:[/red] {script}")
        raise typer.Exit(2)
    except (ActionScriptError, MalformedPayloadError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    state_hash = compute_state_hash(result.state)

    if json_output:
        output = {
            "success": True,
            "actions_replayed": result.applied,
            "state_hash": state_hash,
            "kind_counts": result.kind_counts,
        }
        if show_state:
            output["state"] = redact_state(result.state)
        print(json.dumps(output, indent=2, sort_keys=True, default=str))
        raise typer.Exit(0)

    console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
    console.print(f"  State hash: [yellow]{state_hash}[/yellow]")

    table = Table(title="Action Counts")
    table.add_column("Kind", style="green")
    table.add_column("Count", style="cyan", justify="right")
    for kind in sorted(result.kind_counts):
        table.add_row(kind, str(result.kind_counts[kind]))
    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        syntax_str = json.dumps(redact_state(result.state), indent=2, sort_keys=True, default=str)
        console.print(Syntax(syntax_str, "json", theme="monokai"))

    raise typer.Exit(0)
