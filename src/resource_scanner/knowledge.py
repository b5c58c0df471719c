"""Caller-side bookkeeping of which tiles an agent has already seen."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Position, ScanHit, ScanResult


class KnowledgeMap:
    """Tracks positions an agent knows about.

    The scanner reports hits whether or not they are known; this map lets the
    caller keep only the newly discovered ones.
    """

    def __init__(self, known: Iterable[Position] = ()) -> None:
        self._known: set[Position] = set(known)

    def __len__(self) -> int:
        return len(self._known)

    def is_known(self, position: Position) -> bool:
        return position in self._known

    def mark(self, position: Position) -> None:
        self._known.add(position)

    def record(self, result: ScanResult) -> None:
        self._known.update(result.scanned)

    def unseen(self, result: ScanResult) -> list[ScanHit]:
        return [hit for hit in result.hits if hit.position not in self._known]
