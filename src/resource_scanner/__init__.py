"""Tile-pattern resource scanning for grid-world agents."""

from .errors import (
    EnergyDebitError,
    InsufficientEnergyError,
    InvalidPatternError,
    NoTilesDiscoverableError,
    ScanError,
    WorldContractError,
)
from .knowledge import KnowledgeMap
from .models import Content, Position, ScanHit, ScanResult, TileSample, TileStatus
from .patterns import Pattern, PatternKind, generate
from .scanner import ResourceScanner
from .world import Agent, EnergyAgent, GridWorld, World, load_world

__all__ = [
    "Agent",
    "Content",
    "EnergyAgent",
    "EnergyDebitError",
    "GridWorld",
    "InsufficientEnergyError",
    "InvalidPatternError",
    "KnowledgeMap",
    "NoTilesDiscoverableError",
    "Pattern",
    "PatternKind",
    "Position",
    "ResourceScanner",
    "ScanError",
    "ScanHit",
    "ScanResult",
    "TileSample",
    "TileStatus",
    "World",
    "WorldContractError",
    "generate",
    "load_world",
]
