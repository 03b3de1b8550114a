"""CLI for replaying recorded input sessions."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from input_state import __version__
from input_state.config import get_environment
from input_state.io import read_jsonl, read_yaml, write_jsonl
from input_state.replay import (
    ScenarioError,
    load_form_scenario,
    load_search_scenario,
    replay_form,
    replay_search,
)

app = typer.Typer(
    name="input-state",
    help="Replay form and search bar input sessions.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"input-state version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log state transitions to stderr"),
    ] = False,
) -> None:
    """input-state: form and search input state, replayable from the shell."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _load_inputs(config_path: Path, events_path: Path) -> tuple[dict, list[dict]]:
    for path in (config_path, events_path):
        if not path.exists():
            console.print(f"[red]Error:[/red] File not found: {path}")
            raise typer.Exit(1)
    try:
        return read_yaml(config_path), list(read_jsonl(events_path))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _format_map(data: dict) -> str:
    if not data:
        return "[dim]-[/dim]"
    return ", ".join(f"{key}={value!r}" for key, value in data.items())


@app.command("replay-form")
def replay_form_command(
    config_path: Annotated[Path, typer.Argument(help="Form scenario YAML")],
    events_path: Annotated[Path, typer.Argument(help="Form events JSONL")],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write state snapshots as JSONL"),
    ] = None,
) -> None:
    """Replay form events and show the state after each one."""
    config, events = _load_inputs(config_path, events_path)

    try:
        snapshots = replay_form(load_form_scenario(config), events)
    except ScenarioError as e:
        console.print(f"[red]Invalid scenario:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Form replay ({get_environment()})")
    table.add_column("#", justify="right")
    table.add_column("Event")
    table.add_column("Values")
    table.add_column("Errors", style="red")
    table.add_column("Touched")
    table.add_column("Outcome")

    for snap in snapshots:
        event = snap["op"] if snap["field"] is None else f"{snap['op']} {snap['field']}"
        touched = [name for name, flag in snap["touched"].items() if flag]
        table.add_row(
            str(snap["step"]),
            event,
            _format_map(snap["values"]),
            _format_map(snap["errors"]),
            ", ".join(touched) or "[dim]-[/dim]",
            snap["outcome"] or "",
        )
    console.print(table)

    submitted = snapshots[-1]["submissions"] if snapshots else 0
    console.print(f"\n[bold]Submissions:[/bold] {submitted}")

    if output_path is not None:
        count = write_jsonl(output_path, snapshots)
        console.print(f"[green]✓[/green] {count} snapshots written to {output_path}")


@app.command("replay-search")
def replay_search_command(
    config_path: Annotated[Path, typer.Argument(help="Search scenario YAML")],
    events_path: Annotated[Path, typer.Argument(help="Search events JSONL")],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write state snapshots as JSONL"),
    ] = None,
) -> None:
    """Replay search bar events on a virtual clock."""
    config, events = _load_inputs(config_path, events_path)

    try:
        snapshots = replay_search(load_search_scenario(config), events)
    except ScenarioError as e:
        console.print(f"[red]Invalid scenario:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Search replay ({get_environment()})")
    table.add_column("#", justify="right")
    table.add_column("t (ms)", justify="right")
    table.add_column("Event")
    table.add_column("Value")
    table.add_column("Placeholder")
    table.add_column("Searches", style="cyan")
    table.add_column("Results")

    for snap in snapshots:
        table.add_row(
            str(snap["step"]),
            f"{snap['clock_ms']:.0f}",
            snap["op"],
            repr(snap["value"]),
            snap["placeholder"],
            ", ".join(repr(q) for q in snap["searches"]),
            ", ".join(str(r) for r in snap["results"]),
        )
    console.print(table)

    total = sum(len(snap["searches"]) for snap in snapshots)
    console.print(f"\n[bold]Searches fired:[/bold] {total}")

    if output_path is not None:
        count = write_jsonl(output_path, snapshots)
        console.print(f"[green]✓[/green] {count} snapshots written to {output_path}")


if __name__ == "__main__":
    app()
