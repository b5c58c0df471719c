from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .patterns import Pattern


class Content(str, Enum):
    ROCK = "rock"
    TREE = "tree"
    GARBAGE = "garbage"
    FIRE = "fire"
    COIN = "coin"
    BIN = "bin"
    CRATE = "crate"
    BANK = "bank"
    WATER = "water"
    MARKET = "market"
    FISH = "fish"
    BUILDING = "building"
    BUSH = "bush"
    JOLLY_BLOCK = "jolly_block"
    SCARECROW = "scarecrow"
    NONE = "none"


class TileStatus(str, Enum):
    """How much the world could tell about a queried coordinate."""

    KNOWN = "known"
    UNKNOWN = "unknown"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True, slots=True)
class Position:
    """Grid coordinate; row 0 is the top row, col 0 the left column."""

    row: int
    col: int

    def __add__(self, other: Position) -> Position:
        return Position(self.row + other.row, self.col + other.col)

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col


@dataclass(frozen=True, slots=True)
class TileSample:
    status: TileStatus
    content: Content = Content.NONE
    quantity: int = 0

    @classmethod
    def known(cls, content: Content, quantity: int = 0) -> TileSample:
        return cls(status=TileStatus.KNOWN, content=content, quantity=quantity)

    @classmethod
    def unknown(cls) -> TileSample:
        return cls(status=TileStatus.UNKNOWN)

    @classmethod
    def out_of_bounds(cls) -> TileSample:
        return cls(status=TileStatus.OUT_OF_BOUNDS)


@dataclass(frozen=True, slots=True)
class ScanHit:
    position: Position
    quantity: int


@dataclass(slots=True)
class ScanResult:
    """Tiles holding the requested content, in scan order.

    Hits are reported for every matching tile inside the pattern footprint,
    whether or not the agent already knew about it. Callers that only want
    newly discovered tiles diff ``hits`` against their own map (see
    ``resource_scanner.knowledge.KnowledgeMap``).
    """

    pattern: Pattern
    content: Content
    hits: list[ScanHit] = field(default_factory=list)
    scanned: list[Position] = field(default_factory=list)
    energy_spent: int = 0

    @property
    def count(self) -> int:
        return len(self.hits)

    @property
    def total_quantity(self) -> int:
        return sum(hit.quantity for hit in self.hits)

    def richest(self) -> ScanHit | None:
        """Return the hit with the largest quantity, the earliest one on ties."""
        best: ScanHit | None = None
        for hit in self.hits:
            if best is None or hit.quantity > best.quantity:
                best = hit
        return best
