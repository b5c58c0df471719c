"""Energy pricing for scan patterns.

Cost is derived from the unclipped footprint, so probing near a world edge
costs the same as probing in open terrain.
"""

from __future__ import annotations

from .config import settings
from .patterns import Pattern, PatternKind

_STARS = {PatternKind.STRAIGHT_STAR, PatternKind.DIAGONAL_STAR}


def tile_count(pattern: Pattern) -> int:
    """Number of tiles the pattern visits before clipping."""
    if pattern.kind is PatternKind.AREA:
        return max(pattern.size * pattern.size - 1, 0)
    if pattern.kind in _STARS:
        return 4 * pattern.size
    return pattern.size


def cost(pattern: Pattern, energy_per_tile: int | None = None) -> int:
    per_tile = settings.energy_per_tile if energy_per_tile is None else energy_per_tile
    if per_tile < 0:
        raise ValueError(f"energy_per_tile must not be negative, got {per_tile}")
    return tile_count(pattern) * per_tile
