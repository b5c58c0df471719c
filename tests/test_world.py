from __future__ import annotations

import json
from pathlib import Path

import pytest

from resource_scanner.models import Content, Position, TileStatus
from resource_scanner.world import EnergyAgent, GridWorld, WorldFormatError, load_world, world_from_payload


def test_grid_world_reports_contents_and_bounds() -> None:
    world = GridWorld(width=4, height=2)
    world.place(Position(1, 3), Content.FISH, 3)

    assert world.dimensions() == (4, 2)
    sample = world.tile_at(Position(1, 3))
    assert sample.status is TileStatus.KNOWN
    assert (sample.content, sample.quantity) == (Content.FISH, 3)
    assert world.tile_at(Position(0, 0)).content is Content.NONE
    assert world.tile_at(Position(2, 0)).status is TileStatus.OUT_OF_BOUNDS
    assert world.tile_at(Position(0, -1)).status is TileStatus.OUT_OF_BOUNDS


def test_place_outside_world_is_rejected() -> None:
    with pytest.raises(ValueError):
        GridWorld(width=2, height=2).place(Position(2, 0), Content.ROCK)


def test_placing_none_clears_tile() -> None:
    world = GridWorld(width=2, height=2)
    world.place(Position(0, 0), Content.ROCK, 2)
    world.place(Position(0, 0), Content.NONE)

    assert world.tile_at(Position(0, 0)).content is Content.NONE


def test_from_rows_uses_legend() -> None:
    world = GridWorld.from_rows(["o.t", "..."], legend={"o": (Content.COIN, 1), "t": (Content.TREE, 4)})

    assert world.dimensions() == (3, 2)
    assert world.tile_at(Position(0, 0)).content is Content.COIN
    assert world.tile_at(Position(0, 2)).quantity == 4
    assert world.tile_at(Position(1, 1)).content is Content.NONE


def test_load_world_from_json(tmp_path: Path) -> None:
    path = tmp_path / "world.json"
    path.write_text(
        json.dumps(
            {
                "width": 5,
                "height": 5,
                "tiles": [
                    {"row": 0, "col": 2, "content": "coin"},
                    {"row": 4, "col": 4, "content": "ROCK", "quantity": 3},
                ],
            }
        ),
        encoding="utf-8",
    )

    world = load_world(path)

    assert world.dimensions() == (5, 5)
    assert world.tile_at(Position(0, 2)).quantity == 1
    assert world.tile_at(Position(4, 4)).content is Content.ROCK


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"width": 3},
        {"width": "wide", "height": 3},
        {"width": 3, "height": 3, "tiles": {}},
        {"width": 3, "height": 3, "tiles": ["coin"]},
        {"width": 3, "height": 3, "tiles": [{"row": 0, "content": "coin"}]},
        {"width": 3, "height": 3, "tiles": [{"row": 0, "col": 0, "content": "gold"}]},
        {"width": 3, "height": 3, "tiles": [{"row": 5, "col": 0, "content": "coin"}]},
    ],
)
def test_malformed_world_documents_are_rejected(payload) -> None:
    with pytest.raises(WorldFormatError):
        world_from_payload(payload)


def test_load_world_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(WorldFormatError):
        load_world(path)


def test_energy_agent_debits_and_recharges() -> None:
    agent = EnergyAgent(Position(0, 0), energy=5)

    assert agent.debit_energy(3) is True
    assert agent.debit_energy(3) is False
    assert agent.debit_energy(-1) is False
    assert agent.current_energy() == 2

    agent.recharge(4)
    agent.move_to(Position(1, 1))
    assert agent.current_energy() == 6
    assert agent.position() == Position(1, 1)


def test_load_world_rejects_non_utf8_bytes(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{bad")

    with pytest.raises(WorldFormatError):
        load_world(path)
