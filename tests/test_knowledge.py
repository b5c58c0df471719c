from resource_scanner.knowledge import KnowledgeMap
from resource_scanner.models import Content, Position, ScanHit
from resource_scanner.patterns import Pattern
from resource_scanner.scanner import ResourceScanner
from resource_scanner.world import EnergyAgent, GridWorld


def test_scan_reports_known_tiles_and_map_filters_them() -> None:
    world = GridWorld.from_rows(["oo.o"])
    agent = EnergyAgent(Position(0, 0), energy=50)
    knowledge = KnowledgeMap()
    # discovery-on-move already revealed the neighbouring tile
    knowledge.mark(Position(0, 1))

    result = ResourceScanner(energy_per_tile=1).scan(world, agent, Pattern.direction_right(3), Content.COIN)

    assert [hit.position for hit in result.hits] == [Position(0, 1), Position(0, 3)]
    assert knowledge.unseen(result) == [ScanHit(Position(0, 3), 1)]


def test_record_marks_every_scanned_tile() -> None:
    world = GridWorld.from_rows(["...", "...", "..."])
    agent = EnergyAgent(Position(1, 1), energy=50)
    knowledge = KnowledgeMap([Position(1, 1)])

    result = ResourceScanner().scan(world, agent, Pattern.area(3), Content.COIN)
    knowledge.record(result)

    assert len(knowledge) == 9
    assert knowledge.is_known(Position(2, 2))
    assert knowledge.unseen(result) == []
