"""Pattern scans: price the footprint, charge the agent, report matching tiles."""

from __future__ import annotations

import logging
import threading

from .bounds import clip
from .cost import cost as pattern_cost
from .errors import EnergyDebitError, InsufficientEnergyError, NoTilesDiscoverableError, WorldContractError
from .models import Content, Position, ScanHit, ScanResult, TileStatus
from .patterns import Pattern, generate
from .telemetry import Telemetry
from .world import Agent, World


class ResourceScanner:
    """Scans the tiles around an agent for one kind of content.

    A scan reports every matching tile in the pattern footprint, including
    tiles the agent already knows about. Use
    ``resource_scanner.knowledge.KnowledgeMap`` to keep only new discoveries.

    The energy check and the debit run under one lock per scanner, so
    concurrent scans through the same scanner cannot overdraw an agent.
    Separate scanners sharing one agent only rely on the agent refusing a
    debit it cannot pay, which surfaces as ``EnergyDebitError``.
    """

    def __init__(
        self,
        *,
        energy_per_tile: int | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if energy_per_tile is not None and energy_per_tile < 0:
            raise ValueError(f"energy_per_tile must not be negative, got {energy_per_tile}")
        self._energy_per_tile = energy_per_tile
        self._telemetry = telemetry
        self._logger = logger or logging.getLogger("resource_scanner.scanner")
        self._energy_lock = threading.Lock()

    def cost(self, pattern: Pattern) -> int:
        return pattern_cost(pattern, self._energy_per_tile)

    def footprint(self, world: World, origin: Position, pattern: Pattern) -> list[Position]:
        """Coordinates ``pattern`` would query from ``origin``, clipped to the world."""
        width, height = world.dimensions()
        return clip(generate(pattern, origin), width, height)

    def scan(self, world: World, agent: Agent, pattern: Pattern, content: Content) -> ScanResult:
        """Run one scan and return the matching tiles in footprint order.

        Raises ``InsufficientEnergyError`` or ``NoTilesDiscoverableError`` without
        touching the agent. Energy is debited exactly once, only after the
        footprint is known to be non-empty.
        """
        required = self.cost(pattern)

        with self._energy_lock:
            available = agent.current_energy()
            if available < required:
                self._logger.info(
                    "scan_rejected",
                    extra={"reason": "insufficient_energy", "pattern": str(pattern), "required": required},
                )
                raise InsufficientEnergyError(required=required, available=available)

            origin = agent.position()
            targets = self.footprint(world, origin, pattern)
            if not targets:
                self._logger.info(
                    "scan_rejected",
                    extra={"reason": "no_tiles", "pattern": str(pattern), "origin": origin.as_tuple()},
                )
                raise NoTilesDiscoverableError(f"Pattern {pattern} covers no tiles inside the world from {origin}")

            if not agent.debit_energy(required):
                raise EnergyDebitError(f"Agent refused a debit of {required} after passing the energy check")

        hits: list[ScanHit] = []
        for position in targets:
            sample = world.tile_at(position)
            if sample.status is TileStatus.OUT_OF_BOUNDS:
                raise WorldContractError(f"World reported {position} out of bounds after clipping")
            if sample.status is TileStatus.KNOWN and sample.content == content:
                hits.append(ScanHit(position=position, quantity=sample.quantity))

        result = ScanResult(
            pattern=pattern,
            content=content,
            hits=hits,
            scanned=targets,
            energy_spent=required,
        )
        self._logger.info(
            "scan_completed",
            extra={"pattern": str(pattern), "content": content.value, "hits": result.count, "energy": required},
        )
        if self._telemetry is not None:
            self._telemetry.emit(
                "scan_completed",
                {
                    "pattern": str(pattern),
                    "content": content.value,
                    "origin": origin.as_tuple(),
                    "tiles": len(targets),
                    "hits": result.count,
                    "energy_spent": required,
                },
            )
        return result
