"""CLI entrypoint for the resource scanner."""

from __future__ import annotations

import logging

import typer
from rich import print

from resource_scanner.config import settings
from resource_scanner.cost import tile_count
from resource_scanner.errors import InvalidPatternError, ScanError
from resource_scanner.models import Content, Position, ScanResult
from resource_scanner.patterns import Pattern, generate
from resource_scanner.scanner import ResourceScanner
from resource_scanner.telemetry import LoggingTelemetry, configure_logging
from resource_scanner.world import EnergyAgent, GridWorld, WorldFormatError, load_world

app = typer.Typer(help="Scan grid-world tiles around an agent for resources")


def _parse_pattern(value: str) -> Pattern:
    try:
        return Pattern.parse(value)
    except InvalidPatternError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_content(value: str) -> Content:
    try:
        return Content(value.lower())
    except ValueError as exc:
        choices = ", ".join(item.value for item in Content)
        raise typer.BadParameter(f"Unknown content {value!r}; choose one of: {choices}") from exc


def _load_world(world_file: str | None) -> GridWorld:
    path = world_file or settings.world_path
    if not path:
        raise typer.BadParameter("Provide --world or set RESOURCE_SCANNER_WORLD_PATH")
    try:
        return load_world(path)
    except (OSError, WorldFormatError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _format_result(result: ScanResult) -> dict:
    richest = result.richest()
    return {
        "pattern": str(result.pattern),
        "content": result.content.value,
        "hits": [{"position": hit.position.as_tuple(), "quantity": hit.quantity} for hit in result.hits],
        "count": result.count,
        "total_quantity": result.total_quantity,
        "richest": richest.position.as_tuple() if richest else None,
        "tiles_scanned": len(result.scanned),
        "energy_spent": result.energy_spent,
    }


@app.callback()
def main(log_level: str = typer.Option(None, help="Override RESOURCE_SCANNER_LOG_LEVEL")) -> None:
    level = (log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level {level!r}", param_hint="--log-level")
    configure_logging(level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "energy_per_tile": settings.energy_per_tile,
            "world_path": settings.world_path,
        }
    )


@app.command()
def cost(pattern: str = typer.Argument(..., help="Pattern, e.g. area:5 or direction-up:3")) -> None:
    """Show how many tiles a pattern visits and what it costs."""
    parsed = _parse_pattern(pattern)
    scanner = ResourceScanner()
    print({"pattern": str(parsed), "tiles": tile_count(parsed), "energy": scanner.cost(parsed)})


@app.command()
def footprint(
    pattern: str = typer.Argument(..., help="Pattern, e.g. area:5 or direction-up:3"),
    row: int = typer.Option(..., help="Agent row"),
    col: int = typer.Option(..., help="Agent column"),
    world_file: str = typer.Option(None, "--world", help="Path to a JSON world file for clipping"),
) -> None:
    """List the coordinates a pattern covers from a position."""
    parsed = _parse_pattern(pattern)
    origin = Position(row, col)
    raw = generate(parsed, origin)
    payload: dict = {"pattern": str(parsed), "origin": origin.as_tuple(), "generated": [p.as_tuple() for p in raw]}
    if world_file or settings.world_path:
        world = _load_world(world_file)
        clipped = ResourceScanner().footprint(world, origin, parsed)
        payload["clipped"] = [p.as_tuple() for p in clipped]
    print(payload)


@app.command()
def scan(
    pattern: str = typer.Argument(..., help="Pattern, e.g. area:5 or direction-up:3"),
    content: str = typer.Option(..., help="Content to look for, e.g. coin"),
    row: int = typer.Option(..., help="Agent row"),
    col: int = typer.Option(..., help="Agent column"),
    energy: int = typer.Option(1000, help="Agent energy budget"),
    world_file: str = typer.Option(None, "--world", help="Path to a JSON world file"),
) -> None:
    """Scan the world around an agent and report matching tiles."""
    parsed = _parse_pattern(pattern)
    wanted = _parse_content(content)
    world = _load_world(world_file)
    agent = EnergyAgent(position=Position(row, col), energy=energy)
    scanner = ResourceScanner(telemetry=LoggingTelemetry())

    try:
        result = scanner.scan(world, agent, parsed, wanted)
    except ScanError as exc:
        print({"error": type(exc).__name__, "detail": str(exc), "energy_left": agent.current_energy()})
        raise typer.Exit(code=1)

    print({"scan": _format_result(result), "energy_left": agent.current_energy()})


if __name__ == "__main__":
    app()
