"""CLI entrypoint for tile-radar."""

from __future__ import annotations

import logging
from dataclasses import asdict

import typer
from rich import print
from rich.logging import RichHandler

from tile_radar.adapters import GridMap, InMemoryVariableStore, MapLoadError, RecordingActionDispatcher, load_map
from tile_radar.config import settings
from tile_radar.interpreter import RadarInterpreter
from tile_radar.resolver import CommandError, lookup_kind, resolve_query
from tile_radar.scanner import sample_cell

app = typer.Typer(help="Radar scans over tile maps")


def _configure_logging(level: str | None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _parse_variables(pairs: list[str]) -> dict[int, int]:
    values: dict[int, int] = {}
    for pair in pairs:
        slot, sep, value = pair.partition("=")
        try:
            if not sep:
                raise ValueError(pair)
            values[int(slot)] = int(value)
        except ValueError:
            raise typer.BadParameter(f"Expected SLOT=VALUE with integers, got {pair!r}", param_hint="--var")
    return values


def _open_map(map_path: str | None) -> GridMap:
    path = map_path or settings.map_path
    if not path:
        raise typer.BadParameter("Provide --map or set TILE_RADAR_MAP_PATH", param_hint="--map")
    try:
        return load_map(path)
    except MapLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


@app.command()
def defaults() -> None:
    """Show the configured radar defaults."""
    resolved = settings.to_defaults()
    print(
        {
            "app_name": settings.app_name,
            "radius": resolved.radius,
            "layer": resolved.layer,
            "x_variable": resolved.x_variable,
            "y_variable": resolved.y_variable,
            "placeholder": resolved.placeholder,
            "targets": {kind.command_name: value for kind, value in resolved.targets.items()},
            "actions": {kind.command_name: value for kind, value in resolved.actions.items()},
        }
    )


@app.command("scan", context_settings={"ignore_unknown_options": True})
def scan_command(
    command: str = typer.Argument(..., help="Search type, e.g. eventIDMatch or tileID"),
    args: list[str] = typer.Argument(None, help="ID mapX mapY [layer] radius; use the placeholder to skip one"),
    map_path: str = typer.Option(None, "--map", help="Path to a JSON map"),
    variables: list[str] = typer.Option([], "--var", help="Game variable as SLOT=VALUE (repeatable)"),
    log_level: str = typer.Option(None, help="Override TILE_RADAR_LOG_LEVEL"),
) -> None:
    """Run one radar command and report the first match."""
    _configure_logging(log_level)
    kind = lookup_kind(command)
    if kind is None:
        raise typer.BadParameter(f"Unknown search type: {command}", param_hint="COMMAND")

    radar_defaults = settings.to_defaults()
    dispatcher = RecordingActionDispatcher()
    interpreter = RadarInterpreter(
        radar_defaults,
        variables=InMemoryVariableStore(_parse_variables(variables)),
        maps=_open_map(map_path),
        dispatcher=dispatcher,
    )

    try:
        query = resolve_query(kind, args or [], radar_defaults, interpreter.current_center())
    except CommandError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    match = interpreter.execute(query)
    print(
        {
            "query": {**asdict(query), "kind": kind.command_name},
            "match": asdict(match) if match else None,
            "reserved_actions": dispatcher.reserved,
        }
    )


@app.command(context_settings={"ignore_unknown_options": True})
def inspect(
    x: int = typer.Argument(..., help="Map X"),
    y: int = typer.Argument(..., help="Map Y"),
    map_path: str = typer.Option(None, "--map", help="Path to a JSON map"),
    layer: int = typer.Option(None, help="Tile layer (defaults to TILE_RADAR_TILE_LAYER)"),
) -> None:
    """Show every radar attribute of one cell."""
    grid = _open_map(map_path)
    sample = sample_cell(grid, x, y, settings.tile_layer if layer is None else layer)
    print(asdict(sample))


if __name__ == "__main__":
    app()
