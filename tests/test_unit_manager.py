import pygame

from tactisim.command import MoveCommand
from tactisim.geometry import Vec2
from tactisim.unit import Faction, UnitType, faction_color
from tactisim.unit_manager import UnitManager


def test_new_manager_is_empty():
    manager = UnitManager()
    assert len(manager) == 0
    assert list(manager) == []


def test_add_unit_returns_next_id_and_grows():
    manager = UnitManager()
    for _ in range(3):
        result = manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(1.0, 1.0))
        assert result == len(manager)


def test_ids_are_sequential_from_zero():
    manager = UnitManager()
    manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(10.0, 10.0))
    manager.add_unit(UnitType.TANK, Faction.ENEMY, Vec2(20.0, 20.0))
    assert [unit.id for unit in manager] == list(range(len(manager)))


def test_get_unit_by_id():
    manager = UnitManager()
    manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(10.0, 10.0))
    manager.add_unit(UnitType.TANK, Faction.ENEMY, Vec2(20.0, 30.0))
    tank = manager.get_unit_by_id(1)
    assert tank.unit_type is UnitType.TANK
    assert tank.position == Vec2(20.0, 30.0)


def test_get_unknown_id_returns_none():
    manager = UnitManager()
    manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(10.0, 10.0))
    assert manager.get_unit_by_id(99) is None


def test_iteration_preserves_insertion_order():
    manager = UnitManager()
    factions = [Faction.ENEMY, Faction.FRIENDLY, Faction.NEUTRAL]
    for faction in factions:
        manager.add_unit(UnitType.INFANTRY, faction, Vec2(0.0, 0.0))
    assert [unit.faction for unit in manager] == factions


def test_update_all_advances_commands():
    manager = UnitManager()
    manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(0.0, 0.0))
    manager.add_unit(UnitType.TANK, Faction.ENEMY, Vec2(100.0, 100.0))
    mover = manager.get_unit_by_id(0)
    idle = manager.get_unit_by_id(1)
    mover.set_command(MoveCommand(Vec2(400.0, 0.0)))
    manager.update_all(0.5)
    assert mover.position.x > 0.0
    assert idle.position == Vec2(100.0, 100.0)


def test_draw_all_draws_every_unit():
    manager = UnitManager()
    manager.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, Vec2(20.0, 20.0))
    manager.add_unit(UnitType.TANK, Faction.ENEMY, Vec2(70.0, 60.0))
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    manager.draw_all(surface)
    for unit in manager:
        point = (int(unit.position.x), int(unit.position.y))
        assert tuple(surface.get_at(point))[:3] == faction_color(unit.faction)