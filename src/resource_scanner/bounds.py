from __future__ import annotations

from collections.abc import Iterable

from .models import Position


def in_bounds(position: Position, width: int, height: int) -> bool:
    return 0 <= position.row < height and 0 <= position.col < width


def clip(coordinates: Iterable[Position], width: int, height: int) -> list[Position]:
    """Drop coordinates outside a ``width`` x ``height`` world, keeping input order."""
    return [position for position in coordinates if in_bounds(position, width, height)]
