from __future__ import annotations

import json
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from .bounds import in_bounds
from .models import Content, Position, TileSample

DEFAULT_LEGEND: dict[str, tuple[Content, int]] = {"o": (Content.COIN, 1)}


class WorldFormatError(ValueError):
    """Raised when a world file cannot be turned into a grid."""


class World(Protocol):
    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        ...

    def tile_at(self, position: Position) -> TileSample:
        ...


class Agent(Protocol):
    def position(self) -> Position:
        ...

    def current_energy(self) -> int:
        ...

    def debit_energy(self, amount: int) -> bool:
        """Take ``amount`` from the balance; return ``False`` if it cannot be paid."""
        ...


class GridWorld:
    """In-memory rectangular world with sparse tile contents."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"World dimensions must not be negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: dict[Position, tuple[Content, int]] = {}

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def place(self, position: Position, content: Content, quantity: int = 1) -> None:
        if not in_bounds(position, self.width, self.height):
            raise ValueError(f"{position} is outside a {self.width}x{self.height} world")
        if content is Content.NONE:
            self._tiles.pop(position, None)
            return
        self._tiles[position] = (content, quantity)

    def tile_at(self, position: Position) -> TileSample:
        if not in_bounds(position, self.width, self.height):
            return TileSample.out_of_bounds()
        content, quantity = self._tiles.get(position, (Content.NONE, 0))
        return TileSample.known(content, quantity)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        legend: Mapping[str, tuple[Content, int]] | None = None,
    ) -> GridWorld:
        """Build a world from text rows; characters missing from ``legend`` are empty tiles."""
        legend = DEFAULT_LEGEND if legend is None else legend
        width = max((len(row) for row in rows), default=0)
        world = cls(width=width, height=len(rows))
        for row_index, row in enumerate(rows):
            for col_index, char in enumerate(row):
                if char in legend:
                    content, quantity = legend[char]
                    world.place(Position(row_index, col_index), content, quantity)
        return world


class EnergyAgent:
    """Reference agent holding a position and an energy balance."""

    def __init__(self, position: Position, energy: int) -> None:
        self._position = position
        self._energy = energy
        self._lock = threading.Lock()

    def position(self) -> Position:
        return self._position

    def move_to(self, position: Position) -> None:
        self._position = position

    def current_energy(self) -> int:
        return self._energy

    def debit_energy(self, amount: int) -> bool:
        with self._lock:
            if amount < 0 or amount > self._energy:
                return False
            self._energy -= amount
            return True

    def recharge(self, amount: int) -> None:
        with self._lock:
            self._energy += amount


def _parse_tile(entry: object, index: int) -> tuple[Position, Content, int]:
    if not isinstance(entry, dict):
        raise WorldFormatError(f"Tile #{index} must be an object")
    try:
        position = Position(int(entry["row"]), int(entry["col"]))
        content = Content(str(entry["content"]).lower())
        quantity = int(entry.get("quantity", 1))
    except KeyError as exc:
        raise WorldFormatError(f"Tile #{index} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise WorldFormatError(f"Tile #{index} is invalid: {exc}") from exc
    return position, content, quantity


def world_from_payload(payload: object) -> GridWorld:
    """Build a world from ``{"width", "height", "tiles": [{"row", "col", "content", "quantity"}]}``."""
    if not isinstance(payload, dict) or "width" not in payload or "height" not in payload:
        raise WorldFormatError("World document must be an object with 'width' and 'height'")

    try:
        world = GridWorld(width=int(payload["width"]), height=int(payload["height"]))
    except (TypeError, ValueError) as exc:
        raise WorldFormatError(f"Invalid world dimensions: {exc}") from exc

    tiles = payload.get("tiles", [])
    if not isinstance(tiles, list):
        raise WorldFormatError("'tiles' must be a list")

    for index, entry in enumerate(tiles):
        position, content, quantity = _parse_tile(entry, index)
        try:
            world.place(position, content, quantity)
        except ValueError as exc:
            raise WorldFormatError(f"Tile #{index}: {exc}") from exc
    return world


def load_world(path: str | Path) -> GridWorld:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise WorldFormatError(f"{path} is not UTF-8 text: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise WorldFormatError(f"{path} is not valid JSON: {exc}") from exc
    return world_from_payload(payload)
