"""Command-line interface for inspecting bindings and the binding log."""

from __future__ import annotations

import json
from pathlib import Path

import click

from tabexpr import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tabexpr")
def main() -> None:
    """tabexpr -- function bindings for Arrow compute expressions."""


# ---------------------------------------------------------------------------
# Bindings
# ---------------------------------------------------------------------------


@main.command("bindings")
@click.argument("directory", required=False, type=click.Path(exists=True, file_okay=False))
@click.option("--agg", "aggregate", is_flag=True, help="List aggregate bindings instead.")
@click.option("--cache", "cached", is_flag=True, help="List the assembled cache (includes native bindings).")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def bindings_cmd(directory: str | None, aggregate: bool, cached: bool, as_json: bool) -> None:
    """List registered binding names (optionally for the project in DIRECTORY)."""
    from tabexpr.session import init_session

    if aggregate and cached:
        raise click.ClickException("--agg and --cache are mutually exclusive; aggregates are not cached")

    try:
        session = init_session(Path(directory) if directory else None)
    except ValueError as e:
        raise click.ClickException(str(e))

    if aggregate:
        names = session.aggregate.names()
    elif cached:
        names = sorted(session.cache or {})
    else:
        names = session.scalar.names()

    if as_json:
        click.echo(json.dumps(names, indent=2))
        return
    if not names:
        click.echo("No bindings registered.")
        return
    for name in names:
        click.echo(name)


@main.command("native-functions")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def native_functions_cmd(as_json: bool) -> None:
    """List the compute functions the backend exposes."""
    from tabexpr.engine.backend import ArrowBackend

    backend = ArrowBackend()
    if not backend.available():
        click.echo("Compute backend unavailable.")
        return
    names = list(backend.list_functions())
    if as_json:
        click.echo(json.dumps(names, indent=2))
        return
    for name in names:
        click.echo(name)
    click.echo(f"{len(names)} functions")


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@main.command("events")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
@click.option("--level", default=None, type=click.Choice(["info", "warning", "error"]), help="Filter by level.")
@click.option("--type", "event_type", default=None, help="Filter by event type.")
@click.option("--limit", default=100, type=int, help="Maximum events to show.")
def events_cmd(directory: str, level: str | None, event_type: str | None, limit: int) -> None:
    """Show the structured event log for DIRECTORY."""
    from tabexpr.logging.sink import EventSink

    sink = EventSink(Path(directory))
    events = sink.read_events(level=level, event_type=event_type, limit=limit)

    if not events:
        click.echo("No events found.")
        return

    for evt in events:
        ts = evt.get("ts", "")
        lvl = evt.get("level", "").upper()
        etype = evt.get("event_type", "")
        msg = evt.get("message", "")
        err = evt.get("error_code")
        line = f"[{ts}] {lvl:7s} {etype}: {msg}"
        if err:
            line += f"  ({err})"
        click.echo(line)


if __name__ == "__main__":
    main()
