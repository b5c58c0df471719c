"""Scan pattern descriptors and the footprint geometry they expand to.

Footprint examples, ``r`` marking the agent::

    StraightStar(2)      DiagonalStar(3)

          *              *     *
          *               *   *
        **r**              * *
          *                 r
          *                * *
                          *   *
                         *     *
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidPatternError
from .models import Position

_PATTERN_RE = re.compile(
    r"^\s*(?P<kind>[A-Za-z_\-]+)\s*(?:[:=]\s*(?P<size>-?\d+)|\(\s*(?P<call_size>-?\d+)\s*\))\s*$"
)
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class PatternKind(str, Enum):
    AREA = "area"
    DIRECTION_UP = "direction_up"
    DIRECTION_DOWN = "direction_down"
    DIRECTION_LEFT = "direction_left"
    DIRECTION_RIGHT = "direction_right"
    DIAGONAL_UPPER_LEFT = "diagonal_upper_left"
    DIAGONAL_UPPER_RIGHT = "diagonal_upper_right"
    DIAGONAL_LOWER_LEFT = "diagonal_lower_left"
    DIAGONAL_LOWER_RIGHT = "diagonal_lower_right"
    STRAIGHT_STAR = "straight_star"
    DIAGONAL_STAR = "diagonal_star"


UP = Position(-1, 0)
DOWN = Position(1, 0)
LEFT = Position(0, -1)
RIGHT = Position(0, 1)
UPPER_LEFT = Position(-1, -1)
UPPER_RIGHT = Position(-1, 1)
LOWER_LEFT = Position(1, -1)
LOWER_RIGHT = Position(1, 1)

# Rays walked by every non-area pattern, in emission order.
_RAYS: dict[PatternKind, tuple[Position, ...]] = {
    PatternKind.DIRECTION_UP: (UP,),
    PatternKind.DIRECTION_DOWN: (DOWN,),
    PatternKind.DIRECTION_LEFT: (LEFT,),
    PatternKind.DIRECTION_RIGHT: (RIGHT,),
    PatternKind.DIAGONAL_UPPER_LEFT: (UPPER_LEFT,),
    PatternKind.DIAGONAL_UPPER_RIGHT: (UPPER_RIGHT,),
    PatternKind.DIAGONAL_LOWER_LEFT: (LOWER_LEFT,),
    PatternKind.DIAGONAL_LOWER_RIGHT: (LOWER_RIGHT,),
    PatternKind.STRAIGHT_STAR: (UP, RIGHT, DOWN, LEFT),
    PatternKind.DIAGONAL_STAR: (UPPER_LEFT, UPPER_RIGHT, LOWER_RIGHT, LOWER_LEFT),
}


@dataclass(frozen=True, slots=True)
class Pattern:
    """A scan shape plus its side length (``AREA``) or ray distance (everything else).

    A size of 0 is valid and covers no tiles.
    """

    kind: PatternKind
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidPatternError(f"Pattern size must be an integer, got {self.size!r}")
        if self.size < 0:
            raise InvalidPatternError(f"Pattern size must not be negative, got {self.size}")
        if not isinstance(self.kind, PatternKind):
            try:
                object.__setattr__(self, "kind", PatternKind(self.kind))
            except ValueError as exc:
                raise InvalidPatternError(f"Unknown pattern kind {self.kind!r}") from exc

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.size}"

    @classmethod
    def area(cls, size: int) -> Pattern:
        return cls(PatternKind.AREA, size)

    @classmethod
    def direction_up(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIRECTION_UP, distance)

    @classmethod
    def direction_down(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIRECTION_DOWN, distance)

    @classmethod
    def direction_left(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIRECTION_LEFT, distance)

    @classmethod
    def direction_right(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIRECTION_RIGHT, distance)

    @classmethod
    def diagonal_upper_left(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIAGONAL_UPPER_LEFT, distance)

    @classmethod
    def diagonal_upper_right(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIAGONAL_UPPER_RIGHT, distance)

    @classmethod
    def diagonal_lower_left(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIAGONAL_LOWER_LEFT, distance)

    @classmethod
    def diagonal_lower_right(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIAGONAL_LOWER_RIGHT, distance)

    @classmethod
    def straight_star(cls, distance: int) -> Pattern:
        return cls(PatternKind.STRAIGHT_STAR, distance)

    @classmethod
    def diagonal_star(cls, distance: int) -> Pattern:
        return cls(PatternKind.DIAGONAL_STAR, distance)

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Parse ``area:5``, ``direction-up:3`` or ``DiagonalStar(2)``."""
        match = _PATTERN_RE.match(text)
        if not match:
            raise InvalidPatternError(f"Cannot parse pattern {text!r}; expected <kind>:<size>")

        raw_kind = match.group("kind")
        raw_size = match.group("size") or match.group("call_size")
        name = raw_kind if raw_kind.isupper() else _CAMEL_BOUNDARY.sub("_", raw_kind)
        name = re.sub(r"[_\-]+", "_", name).lower()
        try:
            kind = PatternKind(name)
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in PatternKind)
            raise InvalidPatternError(f"Unknown pattern kind {raw_kind!r}; choose one of: {choices}") from exc
        return cls(kind, int(raw_size))


def _area_offsets(size: int) -> list[Position]:
    # Odd sides are centered; even sides extend one extra tile down and right.
    low = -((size - 1) // 2)
    high = size // 2
    return [
        Position(row, col)
        for row in range(low, high + 1)
        for col in range(low, high + 1)
        if (row, col) != (0, 0)
    ]


def _ray_offsets(step: Position, distance: int) -> list[Position]:
    return [Position(step.row * i, step.col * i) for i in range(1, distance + 1)]


def offsets(pattern: Pattern) -> list[Position]:
    """Relative offsets covered by ``pattern``, origin excluded."""
    if pattern.kind is PatternKind.AREA:
        return _area_offsets(pattern.size)

    out: list[Position] = []
    for step in _RAYS[pattern.kind]:
        out.extend(_ray_offsets(step, pattern.size))
    return out


def generate(pattern: Pattern, origin: Position) -> list[Position]:
    """Absolute coordinates covered by ``pattern`` around ``origin``, before clipping.

    The origin itself is never part of the footprint and no coordinate appears twice.
    """
    targets = (origin + offset for offset in offsets(pattern))
    return list(dict.fromkeys(targets))
